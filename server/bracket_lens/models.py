from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from bracket_lens.config import MAX_TEXT_LENGTH


class Token(BaseModel):
    id: str
    kind: Literal["bracket", "content"]
    # Only set for brackets
    char: Optional[str] = None
    # Only set for content runs; the literal, untrimmed text
    text: Optional[str] = None
    start: int = 0
    depth: int = 0
    # Id of the matched bracket, None while pending or when unmatched
    partner_id: Optional[str] = None

    @property
    def literal(self) -> str:
        if self.kind == "bracket":
            return self.char or ""
        return self.text or ""


class BracketIssue(BaseModel):
    id: str
    char: str
    start: int
    issue: Literal["unclosed", "unexpected"]


class BracketCategory(str, Enum):
    FUNCTION_CALL = "function_call"
    TUPLE = "tuple"
    GROUPING = "grouping"
    INDEXING = "indexing"
    SLICE = "slice"
    LIST = "list"
    DICT = "dict"
    SET = "set"
    UNKNOWN = "unknown"


class ClassificationResult(BaseModel):
    token_id: str
    partner_id: Optional[str] = None
    category: BracketCategory
    title: str
    syntax: str
    description: str
    metaphor: str
    color: str
    subject: str
    inner: str
    example_key: Optional[str] = None
    depth: int = 0
    # Narrative with restricted inline markup (<span class="..."> only)
    message: str


class TextRequest(BaseModel):
    text: str = Field(..., max_length=MAX_TEXT_LENGTH)


class InspectRequest(TextRequest):
    selected_id: Optional[str] = None


class SampleResponse(BaseModel):
    code: str
    message: str


class TokenizeResponse(BaseModel):
    tokens: List[Token] = Field(default_factory=list)
    issues: List[BracketIssue] = Field(default_factory=list)
    max_depth: int = 0


class InspectResponse(BaseModel):
    tokens: List[Token] = Field(default_factory=list)
    analysis: Optional[ClassificationResult] = None
    highlighted: List[str] = Field(default_factory=list)
    message: str
