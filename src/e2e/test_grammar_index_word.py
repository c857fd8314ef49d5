# src/e2e/test_grammar_index_word.py

import pytest

from wwwjdic.errors import ErrorKind, ParseError
from wwwjdic.grammar import (
    DelimiterKind,
    IndexElement,
    parse_index_element,
    parse_index_field,
    parse_index_token,
    parse_index_word,
    serialize_token,
)
from wwwjdic.models import IndexWord


def test_bare_headword_has_no_annotations():
    word, pos = parse_index_word("北 ")
    assert word == IndexWord("北")
    assert word.reading is None and word.sense_number is None
    assert word.form_in_sentence is None and word.good_and_checked is False
    assert pos == 2


def test_sense_and_checked_marker():
    word, _ = parse_index_word("国[02]~\n")
    assert word.sense_number == 2
    assert word.good_and_checked is True
    assert word.reading is None and word.form_in_sentence is None


def test_legacy_pipe_contributes_nothing():
    word, pos = parse_index_word("は|1 結局")
    assert word == IndexWord("は")
    assert pos == 4
    element, _ = parse_index_element("|2", 0)
    assert element == IndexElement(DelimiterKind.BARE, raw="2")


def test_reading_and_form():
    word, _ = parse_index_word("為る(する){せよ}\n")
    assert word == IndexWord("為る", reading="する", form_in_sentence="せよ")


def test_annotations_in_any_order():
    # checked marker first, form before reading: accepted as-is
    word, _ = parse_index_word("彼~{彼の}[01](かれ)\n")
    assert word == IndexWord("彼", reading="かれ", sense_number=1,
                             form_in_sentence="彼の", good_and_checked=True)


def test_first_annotation_of_each_kind_wins():
    word, _ = parse_index_word("事(こと)(ごと)[1][2]{こと}{ごと}\n")
    assert word.reading == "こと"
    assert word.sense_number == 1
    assert word.form_in_sentence == "こと"


def test_negative_and_signed_sense_numbers():
    assert parse_index_word("a[-3]\n")[0].sense_number == -3
    assert parse_index_word("a[+4]\n")[0].sense_number == 4


def test_field_keeps_order_and_duplicates():
    words = parse_index_field("の 国 の\n")
    assert [w.headword for w in words] == ["の", "国", "の"]


def test_field_may_end_with_space_at_end_of_input():
    assert [w.headword for w in parse_index_field("北 ")] == ["北"]


@pytest.mark.parametrize("token, kind", [
    ("市(し\n", ErrorKind.UNTERMINATED_ANNOTATION),
    ("市{した\n", ErrorKind.UNTERMINATED_ANNOTATION),
    ("国[02\n", ErrorKind.UNTERMINATED_ANNOTATION),
    ("国[ab]\n", ErrorKind.INVALID_SENSE_NUMBER),
    ("国[]\n", ErrorKind.INVALID_SENSE_NUMBER),
    ("国[1 ]\n", ErrorKind.INVALID_SENSE_NUMBER),
    ("国[99999999999]\n", ErrorKind.INVALID_SENSE_NUMBER),
    ("は|3\n", ErrorKind.UNRECOGNIZED_ELEMENT),
    ("は|\n", ErrorKind.UNRECOGNIZED_ELEMENT),
    ("(し)\n", ErrorKind.EMPTY_HEADWORD),
    ("~\n", ErrorKind.EMPTY_HEADWORD),
    ("\n", ErrorKind.EMPTY_HEADWORD),
    ("北", ErrorKind.MISSING_SEPARATOR),
    ("国(くに)", ErrorKind.MISSING_SEPARATOR),
])
def test_malformed_tokens(token, kind):
    with pytest.raises(ParseError) as ei:
        parse_index_field(token)
    assert ei.value.kind is kind


def test_unrecognized_marker_after_annotation():
    with pytest.raises(ParseError) as ei:
        parse_index_word("国(くに)x\n")
    assert ei.value.kind is ErrorKind.UNRECOGNIZED_ELEMENT
    assert ei.value.position == 5


def test_annotation_cannot_span_lines():
    with pytest.raises(ParseError) as ei:
        parse_index_word("市(し\n)\n")
    assert ei.value.kind is ErrorKind.UNTERMINATED_ANNOTATION
    assert ei.value.position == 1


@pytest.mark.parametrize("token", [
    "北",
    "国[02]~",
    "男の子(おとこのこ)",
    "為る(する){した}",
    "彼(かれ)[01]{彼の}~",
])
def test_canonical_tokens_serialize_back(token):
    word, _ = parse_index_word(token + "\n")
    assert word.to_token() == token


def test_pipe_artifact_is_dropped_on_serialize():
    word, _ = parse_index_word("は|1\n")
    assert word.to_token() == "は"


@pytest.mark.parametrize("token", [
    "国[2]",
    "国[02]~",
    "a[+4]",
    "a[-01]",
    "彼~(かれ)",
    "彼{彼の}(かれ)",
    "為る~{した}[003](する)",
    "事(こと)(ごと)",
    "は|1",
    "は|2~",
    "北",
])
def test_tokens_serialize_back_as_written(token):
    headword, elements, pos = parse_index_token(token + "\n")
    assert pos == len(token) + 1
    assert serialize_token(headword, elements) == token


def test_elements_keep_parse_order():
    _, elements, _ = parse_index_token("彼~{彼の}[01](かれ) ")
    assert [e.kind for e in elements] == [
        DelimiterKind.GOOD_AND_CHECKED,
        DelimiterKind.FORM,
        DelimiterKind.SENSE,
        DelimiterKind.READING,
    ]
    assert elements[2] == IndexElement(DelimiterKind.SENSE, 1, "01")


def test_index_words_sort_with_absent_fields_first():
    words = [
        IndexWord("犬", reading="いぬ"),
        IndexWord("猫", sense_number=2),
        IndexWord("犬"),
        IndexWord("猫", sense_number=1),
        IndexWord("犬", good_and_checked=True),
    ]
    assert sorted(words) == [
        IndexWord("犬"),
        IndexWord("犬", good_and_checked=True),
        IndexWord("犬", reading="いぬ"),
        IndexWord("猫", sense_number=1),
        IndexWord("猫", sense_number=2),
    ]
    assert IndexWord("a") < IndexWord("a", form_in_sentence="x")
    assert IndexWord("b") > IndexWord("a", reading="z")
