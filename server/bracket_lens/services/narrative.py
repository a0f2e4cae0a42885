"""
Narrative text shown in the interpreter console for each bracket category.

The console renders a small inline-markup subset (``<span class="...">``), so
every value that comes from the user's code is HTML-escaped before it is
substituted into a template. Templates themselves are trusted.
"""

from html import escape
from typing import Dict, Optional

from bracket_lens.models import BracketCategory

PREFIX = "Interpreter: "

_TEMPLATES: Dict[BracketCategory, str] = {
    BracketCategory.FUNCTION_CALL: (
        "[Command issued!] Calling the <span class=\"text-amber font-bold\">{subject}</span> "
        "headquarters. We feed the raw material \"<span class=\"text-slate-200\">{inner}</span>\" "
        "into the machine and wait for it to hand back a result."
    ),
    BracketCategory.TUPLE: (
        "[Sealed for good] This is an archive sent to the future. Packed inside is "
        "<span class=\"text-slate-200\">{inner}</span>. Once these round brackets go on, it "
        "sets like concrete and nobody can change what is inside."
    ),
    BracketCategory.GROUPING: (
        "[VIP lane] However complicated the expression outside, "
        "<span class=\"text-amber font-bold\">( {inner} )</span> must be worked out first. "
        "It is the centre of attention and has the final say."
    ),
    BracketCategory.INDEXING: (
        "[Precise pick] Target locked! Take ticket number "
        "<span class=\"text-green font-bold\">[ {inner} ]</span> to the container just before it "
        "and fetch that one item. Nothing else."
    ),
    BracketCategory.SLICE: (
        "[Batch cut] A clean slice! We cut the range "
        "<span class=\"text-green font-bold\">[ {inner} ]</span> out of the list and carry it off "
        "to do something else."
    ),
    BracketCategory.LIST: (
        "[Building shelves] Assembling a shelf called List. Right now it holds "
        "<span class=\"text-slate-200\">{inner}</span>. It is flexible and new goods are always "
        "welcome."
    ),
    BracketCategory.DICT: (
        "[Writing the index] We are building a lookup system. Just call out "
        "\"<span class=\"text-purple font-bold\">{example_key}</span>\" (the key) and the matching "
        "data (the value) comes straight back."
    ),
    BracketCategory.SET: (
        "[Removing duplicates] This is a one-of-a-kind zone. Every repeated element gets "
        "kicked out, and the remaining <span class=\"text-slate-200\">{inner}</span> tumble around "
        "the bag in no particular order."
    ),
}

UNKNOWN_MESSAGE = "unknown"


def build_message(
    category: BracketCategory,
    subject: str,
    inner: str,
    example_key: Optional[str] = None,
) -> str:
    template = _TEMPLATES.get(category)
    if template is None:
        return PREFIX + UNKNOWN_MESSAGE

    return PREFIX + template.format(
        subject=escape(subject),
        inner=escape(inner),
        example_key=escape(example_key or ""),
    )
