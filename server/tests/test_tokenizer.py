from bracket_lens.config import SAMPLE_CODE
from bracket_lens.services.tokenizer import max_depth, render, tokenize, unmatched_brackets


def _by_id(tokens):
    return {t.id: t for t in tokens}


def _shape(tokens):
    # Pairing expressed by position so two passes can be compared without ids
    index_of = {t.id: i for i, t in enumerate(tokens)}
    return [
        (t.kind, t.char, t.text, t.depth, index_of.get(t.partner_id))
        for t in tokens
    ]


def test_function_call_example():
    tokens = tokenize("a(b)")

    assert [t.kind for t in tokens] == ["content", "bracket", "content", "bracket"]
    content_a, opener, content_b, closer = tokens

    assert content_a.text == "a"
    assert content_a.depth == 0
    assert opener.char == "(" and opener.depth == 1
    assert content_b.text == "b" and content_b.depth == 1
    assert closer.char == ")" and closer.depth == 1

    assert opener.partner_id == closer.id
    assert closer.partner_id == opener.id


def test_empty_input_yields_no_tokens():
    assert tokenize("") == []


def test_whitespace_only_runs_are_dropped():
    tokens = tokenize("(  ) [\t]")

    assert all(t.kind == "bracket" for t in tokens)
    assert len(tokens) == 4


def test_content_keeps_untrimmed_text():
    tokens = tokenize("f( x )")

    inner = tokens[2]
    assert inner.kind == "content"
    assert inner.text == " x "


def test_ids_are_derived_from_position_and_kind():
    tokens = tokenize("ab(c)")

    assert [t.id for t in tokens] == ["content-0", "open-2", "content-3", "close-4"]
    assert [t.start for t in tokens] == [0, 2, 3, 4]


def test_nested_depths_and_pairs():
    tokens = tokenize("f([{x}])")
    by_char = {}
    for t in tokens:
        if t.kind == "bracket":
            by_char.setdefault(t.char, t)

    assert by_char["("].depth == 1
    assert by_char["["].depth == 2
    assert by_char["{"].depth == 3
    assert by_char["}"].depth == 3
    assert by_char["]"].depth == 2
    assert by_char[")"].depth == 1

    x = [t for t in tokens if t.kind == "content" and t.text == "x"][0]
    assert x.depth == 3


def test_mismatched_closer_leaves_both_unmatched():
    tokens = tokenize("(a]")

    opener, content, closer = tokens
    assert opener.char == "(" and opener.partner_id is None
    assert content.text == "a"
    assert closer.char == "]" and closer.partner_id is None
    assert all(t.depth >= 0 for t in tokens)


def test_orphan_closer_does_not_go_negative():
    tokens = tokenize(")) (x)")

    assert tokens[0].partner_id is None
    assert tokens[1].partner_id is None
    assert tokens[0].depth == 0
    assert tokens[1].depth == 0

    opener = tokens[2]
    assert opener.depth == 1
    assert opener.partner_id == tokens[-1].id


def test_orphan_closer_inside_pair_keeps_outer_pair_intact():
    tokens = tokenize("(a ] b)")
    by_id = _by_id(tokens)

    opener = tokens[0]
    closer = tokens[-1]
    stray = [t for t in tokens if t.char == "]"][0]

    assert stray.partner_id is None
    assert stray.depth == 1
    assert by_id[opener.partner_id] is closer
    assert opener.depth == closer.depth == 1


def test_unclosed_openers_stay_pending():
    tokens = tokenize("f(x[1")

    brackets = [t for t in tokens if t.kind == "bracket"]
    assert [t.char for t in brackets] == ["(", "["]
    assert all(t.partner_id is None for t in brackets)
    assert [t.depth for t in brackets] == [1, 2]


def test_matched_pairs_are_mutual_and_balanced():
    text = "x = {'a': [1, (2, 3)], 'b': f(g[0])} ) ( ]"
    tokens = tokenize(text)
    by_id = _by_id(tokens)

    openers = [t for t in tokens if t.kind == "bracket" and t.char in "([{" and t.partner_id]
    closers = [t for t in tokens if t.kind == "bracket" and t.char in ")]}" and t.partner_id]
    assert len(openers) == len(closers)

    index_of = {t.id: i for i, t in enumerate(tokens)}
    for opener in openers:
        closer = by_id[opener.partner_id]
        assert closer.partner_id == opener.id
        assert closer.depth == opener.depth
        assert index_of[opener.id] < index_of[closer.id]

    assert all(t.depth >= 0 for t in tokens)
    assert all(t.partner_id is None for t in tokens if t.kind == "content")


def test_render_reconstructs_text_without_blank_runs():
    text = 'result = api_call( "user_data" )[0]'
    assert render(tokenize(text)) == text

    assert render(tokenize("[ 1 ] ( )")) == "[ 1 ]()"


def test_retokenizing_gives_same_structure():
    first = tokenize(SAMPLE_CODE)
    second = tokenize(SAMPLE_CODE)

    assert _shape(first) == _shape(second)
    assert [t.id for t in first] == [t.id for t in second]


def test_sample_code_tokens():
    tokens = tokenize(SAMPLE_CODE)
    by_id = _by_id(tokens)

    assert by_id["content-0"].text == "result = api_call"
    assert by_id["open-17"].partner_id == "close-31"
    assert by_id["open-32"].partner_id == "close-34"
    assert by_id["open-35"].partner_id == "close-75"
    assert by_id["open-37"].partner_id == "close-73"
    assert by_id["open-58"].partner_id == "close-71"

    assert by_id["open-58"].depth == 3
    assert max_depth(tokens) == 3
    assert unmatched_brackets(tokens) == []


def test_unmatched_brackets_report():
    tokens = tokenize("(a] )")
    issues = unmatched_brackets(tokens)

    # "(" pairs with the final ")", only the stray "]" is reported
    assert [(i.char, i.issue) for i in issues] == [("]", "unexpected")]

    issues = unmatched_brackets(tokenize("[x"))
    assert [(i.id, i.issue) for i in issues] == [("open-0", "unclosed")]


def test_max_depth_of_empty_sequence():
    assert max_depth([]) == 0
