from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from bracket_lens.config import (
    ANONYMOUS_SUBJECT,
    CLOSING_BRACKETS,
    DEFAULT_EXAMPLE_KEY,
    DISPLAY_KEEP,
    DISPLAY_LIMIT,
    ELLIPSIS,
    EMPTY_PLACEHOLDER,
    QUOTE_CHARS,
    UNKNOWN_PLACEHOLDER,
)
from bracket_lens.models import BracketCategory, ClassificationResult, Token
from bracket_lens.services.narrative import build_message

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Card:
    title: str
    syntax: str
    description: str
    metaphor: str
    color: str


def _is_identifier_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def _trimmed_content(token: Optional[Token]) -> Optional[str]:
    if token is None or token.kind != "content":
        return None
    return (token.text or "").strip()


def _trailing_identifier(text: str) -> str:
    """Longest run of identifier characters at the end of ``text``."""
    i = len(text)
    while i > 0 and _is_identifier_char(text[i - 1]):
        i -= 1
    return text[i:]


def _find_index(tokens: List[Token], token_id: Optional[str]) -> int:
    if token_id is None:
        return -1
    for i, t in enumerate(tokens):
        if t.id == token_id:
            return i
    return -1


def _span_bounds(tokens: List[Token], index: int) -> Optional[Tuple[int, int]]:
    """
    Return ``(start, end)`` so that ``tokens[start:end]`` is the inner span of
    the bracket at ``index``. Opener or closer gives the same span.
    """
    token = tokens[index]
    partner_index = _find_index(tokens, token.partner_id)
    if partner_index < 0:
        return None
    if partner_index > index:
        return index + 1, partner_index
    return partner_index + 1, index


def _inner_text(tokens: List[Token], index: int) -> Tuple[str, str]:
    """
    Return ``(raw, display)`` inner text for the bracket at ``index``.

    ``raw`` is the full trimmed text and is what every classification rule
    looks at. ``display`` is shortened for the card and narrative only.
    """
    bounds = _span_bounds(tokens, index)
    if bounds is None:
        return "", UNKNOWN_PLACEHOLDER

    start, end = bounds
    raw = "".join(t.literal for t in tokens[start:end]).strip()
    if not raw:
        return raw, EMPTY_PLACEHOLDER
    if len(raw) > DISPLAY_LIMIT:
        return raw, raw[:DISPLAY_KEEP] + ELLIPSIS
    return raw, raw


def _decide(
    char: str,
    prev: Optional[Token],
    raw_inner: str,
) -> BracketCategory:
    prev_text = _trimmed_content(prev)
    ends_with_identifier = bool(prev_text) and _is_identifier_char(prev_text[-1])

    if char in ("(", ")"):
        if ends_with_identifier:
            return BracketCategory.FUNCTION_CALL
        if "," in raw_inner:
            return BracketCategory.TUPLE
        return BracketCategory.GROUPING

    if char in ("[", "]"):
        # Subscripting a name, a string literal, or the result of another bracket
        is_indexing = (
            ends_with_identifier
            or (bool(prev_text) and prev_text[-1] in QUOTE_CHARS)
            or (prev is not None and prev.kind == "bracket" and prev.char in CLOSING_BRACKETS)
        )
        if is_indexing:
            return BracketCategory.INDEXING
        if ":" in raw_inner:
            return BracketCategory.SLICE
        return BracketCategory.LIST

    if char in ("{", "}"):
        if ":" in raw_inner:
            return BracketCategory.DICT
        return BracketCategory.SET

    return BracketCategory.UNKNOWN


def _card(category: BracketCategory, subject: str, inner: str) -> _Card:
    if category == BracketCategory.FUNCTION_CALL:
        return _Card(
            title="Execute & combine",
            syntax=f"Function Call: {subject}()",
            description=f"Tells the program to run the feature called {subject} and pass it arguments.",
            metaphor="The start button on a machine",
            color="amber",
        )
    if category == BracketCategory.TUPLE:
        return _Card(
            title="Immutable sequence",
            syntax="Tuple",
            description="Packs several values together in a fixed order; once created it cannot be changed.",
            metaphor="A welded metal parcel",
            color="amber",
        )
    if category == BracketCategory.GROUPING:
        return _Card(
            title="Precedence",
            syntax="Priority (evaluate first)",
            description="Changes the order of evaluation so the enclosed expression is worked out first.",
            metaphor="The VIP lane",
            color="amber",
        )
    if category == BracketCategory.INDEXING:
        return _Card(
            title="Locate & index",
            syntax=f"Indexing [{inner}]",
            description="Picks out the element at a specific position or key of the container before it.",
            metaphor="Opening a mailbox by its number",
            color="green",
        )
    if category == BracketCategory.SLICE:
        return _Card(
            title="Slice",
            syntax=f"List Slicing [{inner}]",
            description="Cuts a contiguous range out of a sequence, like slicing bread.",
            metaphor="Cutting a length of sausage",
            color="green",
        )
    if category == BracketCategory.LIST:
        return _Card(
            title="Mutable container",
            syntax="List",
            description="Creates an ordered container that can be added to, removed from or modified at any time.",
            metaphor="A chest of labelled drawers",
            color="green",
        )
    if category == BracketCategory.DICT:
        return _Card(
            title="Mapping & lookup",
            syntax="Dictionary",
            description="Associates keys with values.",
            metaphor="The index page of a dictionary",
            color="purple",
        )
    if category == BracketCategory.SET:
        return _Card(
            title="Unordered set / formatting",
            syntax="Set / F-String",
            description="Defines a group of unique elements, or a placeholder inside a string.",
            metaphor="A lottery bag that drops duplicates",
            color="purple",
        )
    return _Card(
        title="Unknown",
        syntax="Unknown",
        description=UNKNOWN_PLACEHOLDER,
        metaphor=UNKNOWN_PLACEHOLDER,
        color="slate",
    )


def classify(tokens: List[Token], selected_id: Optional[str]) -> Optional[ClassificationResult]:
    """
    Explain the bracket ``selected_id`` in the context of ``tokens``.

    Returns None when the id is unknown or points at a content token. Every
    bracket gets a category; unmatched brackets simply have an unknown inner
    span and fall through to the conservative rules.
    """
    index = _find_index(tokens, selected_id)
    if index < 0:
        return None

    token = tokens[index]
    if token.kind != "bracket" or not token.char:
        return None

    prev = tokens[index - 1] if index > 0 else None
    raw_inner, inner = _inner_text(tokens, index)

    prev_text = _trimmed_content(prev)
    subject = _trailing_identifier(prev_text) if prev_text else ""
    if not subject:
        subject = ANONYMOUS_SUBJECT

    category = _decide(token.char, prev, raw_inner)

    example_key: Optional[str] = None
    if category == BracketCategory.DICT:
        example_key = raw_inner.split(":", 1)[0].strip() or DEFAULT_EXAMPLE_KEY

    card = _card(category, subject, inner)
    logger.debug(f"Classified {token.id} ({token.char}) as {category.value}")

    return ClassificationResult(
        token_id=token.id,
        partner_id=token.partner_id,
        category=category,
        title=card.title,
        syntax=card.syntax,
        description=card.description,
        metaphor=card.metaphor,
        color=card.color,
        subject=subject,
        inner=inner,
        example_key=example_key,
        depth=token.depth,
        message=build_message(category, subject, inner, example_key),
    )


def highlighted_ids(tokens: List[Token], selected_id: Optional[str]) -> List[str]:
    """
    Ids to highlight while ``selected_id`` is hovered: the bracket itself,
    its partner and everything between them.
    """
    index = _find_index(tokens, selected_id)
    if index < 0 or tokens[index].kind != "bracket":
        return []

    bounds = _span_bounds(tokens, index)
    if bounds is None:
        return [tokens[index].id]

    start, end = bounds
    return [t.id for t in tokens[start - 1 : end + 1]]
