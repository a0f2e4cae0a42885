from typing import Dict, Set

OPENING_BRACKETS: Set[str] = {'(', '[', '{'}
CLOSING_BRACKETS: Set[str] = {')', ']', '}'}

# closer -> opener
BRACKET_PAIRS: Dict[str, str] = {
    ')': '(',
    ']': '[',
    '}': '{',
}

QUOTE_CHARS: Set[str] = {'"', "'"}

SAMPLE_CODE: str = 'result = api_call( "user_data" )[0][ { "id": 101, "meta": ( 2024, "Q1" ) } ]'

# Inner text longer than DISPLAY_LIMIT is cut to DISPLAY_KEEP chars + ELLIPSIS.
DISPLAY_LIMIT: int = 20
DISPLAY_KEEP: int = 18
ELLIPSIS: str = "..."

EMPTY_PLACEHOLDER: str = "(empty)"
UNKNOWN_PLACEHOLDER: str = "..."
ANONYMOUS_SUBJECT: str = "anonymous object"
DEFAULT_EXAMPLE_KEY: str = "key"

INTRO_MESSAGE: str = (
    "Level 1: the bracket lens. Hover over any bracket in the code and the "
    "interpreter will explain, live, what that bracket is doing."
)
IDLE_MESSAGE: str = "...waiting to explore..."

# Upper bound on text accepted over HTTP. The analyzer itself has no limit.
MAX_TEXT_LENGTH: int = 10_000

TOKEN_CACHE_SIZE: int = 256
