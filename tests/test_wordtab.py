import pytest

from cubmap.wordtab import find, find_outside_quotes, str_to_wordtab


def test_split_on_spaces_and_tabs():
    assert str_to_wordtab("  a\tbb  c ") == ["a", "bb", "c"]


def test_other_whitespace_is_not_a_separator():
    assert str_to_wordtab("a\nb c") == ["a\nb", "c"]


def test_blank_text_has_no_words():
    assert str_to_wordtab(" \t  ") == []
    assert str_to_wordtab("") == []


def test_split_words_join_back():
    words = str_to_wordtab("16 16 2 1")
    assert " ".join(words) == "16 16 2 1"


def test_find_matches_str_find():
    for text, needle in [("hello", "ll"), ("hello", "lo"), ("hello", "x"), ("ab", "abc")]:
        assert find(text, needle) == text.find(needle)


def test_find_missing_is_minus_one():
    assert find("abc", "abcd") == -1


def test_find_outside_quotes_skips_quoted_text():
    assert find_outside_quotes('x"ab"ab', "ab") == 5


def test_comment_marker_inside_string_is_ignored():
    assert find_outside_quotes('"/*" /* x */', "/*") == 5


def test_find_outside_quotes_without_quotes_agrees_with_find():
    text = "one /* two */ three"
    assert find_outside_quotes(text, "/*") == find(text, "/*")


def test_find_outside_quotes_only_quoted_is_missing():
    assert find_outside_quotes('"ab"', "ab") == -1


@pytest.mark.parametrize("func", [find, find_outside_quotes])
def test_empty_needle_is_rejected(func):
    with pytest.raises(ValueError):
        func("abc", "")