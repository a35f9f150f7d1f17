from __future__ import annotations

import json
import logging
from typing import BinaryIO

from stepwire.json_types import JSONArray
from stepwire.wire.dispatch import Dispatcher
from stepwire.wire.responses import fail_response

logger = logging.getLogger(__name__)


def encode_response(response: JSONArray) -> bytes:
    """Serialize one response line, falling back to a bare fail envelope."""
    try:
        payload = json.dumps(response, separators=(",", ":"), ensure_ascii=False)
        encoded = payload.encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        logger.warning("unencodable response %r: %s", response, exc)
        encoded = json.dumps(fail_response(), separators=(",", ":")).encode("utf-8")
    return encoded + b"\n"


def write_response(writer: BinaryIO, response: JSONArray) -> None:
    writer.write(encode_response(response))
    writer.flush()


class WireProtocol:
    """Request-at-a-time loop over a pre-opened byte stream.

    Each line carries one JSON request and is answered by exactly one JSON
    response line, flushed before the next read.
    """

    def __init__(self, dispatcher: Dispatcher) -> None:
        self.dispatcher = dispatcher

    def process_stream(self, reader: BinaryIO, writer: BinaryIO) -> None:
        try:
            while self.process_one_request(reader, writer):
                pass
        except OSError:
            logger.error("wire stream failed", exc_info=True)
            raise
        logger.info("wire stream closed")

    def process_one_request(self, reader: BinaryIO, writer: BinaryIO) -> bool:
        """Handle one line; return False once the stream is exhausted."""
        line = reader.readline()
        if not line:
            return False
        text = line.strip()
        if not text:
            return True
        try:
            request = json.loads(text)
        except (ValueError, RecursionError) as exc:
            logger.warning("undecodable request line: %s", exc)
            response = fail_response()
        else:
            logger.debug("request %r", request)
            response = self.dispatcher.dispatch(request)
        write_response(writer, response)
        return True
