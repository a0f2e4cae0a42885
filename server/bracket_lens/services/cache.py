import logging
from functools import lru_cache
from typing import Tuple

from bracket_lens.config import TOKEN_CACHE_SIZE
from bracket_lens.models import Token
from bracket_lens.services.tokenizer import tokenize

logger = logging.getLogger(__name__)


@lru_cache(maxsize=TOKEN_CACHE_SIZE)
def get_tokens(text: str) -> Tuple[Token, ...]:
    """
    Memoized tokenization keyed on the exact text.

    Hover events resend the same text over and over, so the router looks
    tokens up here instead of re-tokenizing. Returned tokens are shared
    between callers and must not be mutated.
    """
    logger.debug(f"Token cache miss for {len(text)} chars")
    return tuple(tokenize(text))


def clear_tokens() -> None:
    get_tokens.cache_clear()
