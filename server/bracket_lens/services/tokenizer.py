import logging
from typing import List

from bracket_lens.config import BRACKET_PAIRS, CLOSING_BRACKETS, OPENING_BRACKETS
from bracket_lens.models import BracketIssue, Token

logger = logging.getLogger(__name__)


def tokenize(text: str) -> List[Token]:
    """
    Split ``text`` into bracket tokens and content runs in a single pass.

    - Every bracket character becomes its own token.
    - Characters between brackets are buffered into content runs; runs that
      are only whitespace are consumed but never emitted.
    - Openers are matched against a stack. A closer only pairs with the opener
      on top of the stack when both are the same kind of bracket; anything
      else is left unmatched (``partner_id is None``) rather than raising.

    Depth is 1 for the first level of brackets. An opener and its closer
    always carry the same depth, and depth never goes below zero.
    """
    result: List[Token] = []
    stack: List[int] = []  # indices into `result` of pending openers
    depth = 0
    buffer: List[str] = []
    buffer_start = 0

    def flush_buffer() -> None:
        nonlocal buffer
        if not buffer:
            return
        content = "".join(buffer)
        buffer = []
        if not content.strip():
            return
        result.append(
            Token(
                id=f"content-{buffer_start}",
                kind="content",
                text=content,
                start=buffer_start,
                depth=depth,
            )
        )

    for i, ch in enumerate(text):
        if ch in OPENING_BRACKETS:
            flush_buffer()
            depth += 1
            result.append(Token(id=f"open-{i}", kind="bracket", char=ch, start=i, depth=depth))
            stack.append(len(result) - 1)
        elif ch in CLOSING_BRACKETS:
            flush_buffer()
            token = Token(id=f"close-{i}", kind="bracket", char=ch, start=i, depth=depth)

            if stack and result[stack[-1]].char == BRACKET_PAIRS[ch]:
                opener = result[stack.pop()]
                token.depth = opener.depth
                token.partner_id = opener.id
                opener.partner_id = token.id
                result.append(token)
                depth = max(0, depth - 1)
            else:
                # Stray or mismatched closer: report it, leave the stack alone.
                result.append(token)
        else:
            if not buffer:
                buffer_start = i
            buffer.append(ch)

    flush_buffer()

    if stack:
        logger.debug(f"{len(stack)} unclosed bracket(s) left after tokenizing {len(text)} chars")

    return result


def unmatched_brackets(tokens: List[Token]) -> List[BracketIssue]:
    """Report every bracket that never found a partner, in source order."""
    issues: List[BracketIssue] = []
    for token in tokens:
        if token.kind != "bracket" or token.partner_id is not None:
            continue
        issues.append(
            BracketIssue(
                id=token.id,
                char=token.char or "",
                start=token.start,
                issue="unclosed" if token.char in OPENING_BRACKETS else "unexpected",
            )
        )
    return issues


def max_depth(tokens: List[Token]) -> int:
    return max((t.depth for t in tokens), default=0)


def render(tokens: List[Token]) -> str:
    """Join token literals back together (whitespace-only gaps are gone)."""
    return "".join(t.literal for t in tokens)
