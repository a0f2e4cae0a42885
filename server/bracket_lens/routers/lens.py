import logging

from fastapi import APIRouter

from bracket_lens.config import IDLE_MESSAGE, INTRO_MESSAGE, SAMPLE_CODE
from bracket_lens.models import (
    InspectRequest,
    InspectResponse,
    SampleResponse,
    TextRequest,
    TokenizeResponse,
)
from bracket_lens.services import cache, classifier, tokenizer

router = APIRouter(prefix="/api/lens", tags=["lens"])

logger = logging.getLogger(__name__)


@router.get("/sample", response_model=SampleResponse)
async def get_sample():
    """
    The snippet the lens opens with, plus the intro console message.
    """
    return SampleResponse(code=SAMPLE_CODE, message=INTRO_MESSAGE)


@router.post("/tokenize", response_model=TokenizeResponse)
async def tokenize_text(request: TextRequest):
    """
    Tokenize the text into brackets and content runs.

    Unmatched brackets are reported in ``issues`` so the client can mark them
    as unclosed or unexpected; they never cause an error response.
    """
    tokens = list(cache.get_tokens(request.text))
    issues = tokenizer.unmatched_brackets(tokens)
    if issues:
        logger.info(f"Found {len(issues)} unmatched bracket(s)")

    return TokenizeResponse(
        tokens=tokens,
        issues=issues,
        max_depth=tokenizer.max_depth(tokens),
    )


@router.post("/inspect", response_model=InspectResponse)
async def inspect_selection(request: InspectRequest):
    """
    Explain the hovered bracket.

    An unknown id, a content token or no selection at all is the
    "no selection" state: ``analysis`` is null and the idle message is
    returned so the client can clear its display.
    """
    tokens = list(cache.get_tokens(request.text))
    analysis = classifier.classify(tokens, request.selected_id)

    if analysis is None:
        return InspectResponse(tokens=tokens, analysis=None, highlighted=[], message=IDLE_MESSAGE)

    return InspectResponse(
        tokens=tokens,
        analysis=analysis,
        highlighted=classifier.highlighted_ids(tokens, request.selected_id),
        message=analysis.message,
    )
