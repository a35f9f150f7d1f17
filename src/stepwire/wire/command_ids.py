from __future__ import annotations

# Wire command names as sent by the orchestrator.
BEGIN_SCENARIO = "begin_scenario"
END_SCENARIO = "end_scenario"
INVOKE = "invoke"
SNIPPET_TEXT = "snippet_text"
STEP_MATCHES = "step_matches"

# Sort key is lexical command-name text.
WIRE_COMMAND_IDS: tuple[str, ...] = (
    BEGIN_SCENARIO,
    END_SCENARIO,
    INVOKE,
    SNIPPET_TEXT,
    STEP_MATCHES,
)
