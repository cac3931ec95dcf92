import pytest

from textan_client.report import (
    SEPARATORS,
    TokenKind,
    join_tokens,
    span_text,
    tokenize,
)

SAMPLES = [
    "",
    "Ahoj, svete.",
    ",,,",
    "word",
    " leading and trailing ",
    "line one\nline two\r\n\tindented; done!",
    "no-separators-here_but:colons?",
    "Příliš žluťoučký kůň.",
]


def test_tokenize_splits_words_and_separators() -> None:
    tokens = tokenize("Ahoj, svete.")

    assert [token.text for token in tokens] == ["Ahoj", ",", " ", "svete", "."]
    assert [token.index for token in tokens] == [0, 1, 2, 3, 4]
    assert [token.kind for token in tokens] == [
        TokenKind.WORD,
        TokenKind.SEPARATOR,
        TokenKind.SEPARATOR,
        TokenKind.WORD,
        TokenKind.SEPARATOR,
    ]


def test_tokenize_empty_input() -> None:
    assert tokenize("") == []


def test_tokenize_only_separators() -> None:
    tokens = tokenize(",,,")

    assert [token.text for token in tokens] == [",", ",", ","]
    assert all(token.is_separator for token in tokens)


def test_tokenize_trailing_word() -> None:
    tokens = tokenize("end. tail")

    assert tokens[-1].text == "tail"
    assert tokens[-1].is_word


def test_tokenize_keeps_other_punctuation_inside_words() -> None:
    tokens = tokenize("a-b?c:d")

    assert [token.text for token in tokens] == ["a-b?c:d"]


@pytest.mark.parametrize("text", SAMPLES)
def test_tokenize_is_lossless(text: str) -> None:
    assert join_tokens(tokenize(text)) == text


@pytest.mark.parametrize("text", SAMPLES)
def test_tokenize_never_emits_empty_words(text: str) -> None:
    assert all(token.text for token in tokenize(text) if token.is_word)


@pytest.mark.parametrize("text", SAMPLES)
def test_every_separator_is_its_own_token(text: str) -> None:
    tokens = tokenize(text)
    offset = 0
    for token in tokens:
        if token.is_separator:
            assert len(token.text) == 1
            assert text[offset] == token.text
        else:
            assert not SEPARATORS.intersection(token.text)
        offset += len(token.text)
    assert offset == len(text)


def test_separator_set_matches_delimiters() -> None:
    assert SEPARATORS == frozenset("\n\t\r ,.;!")


def test_tokens_are_immutable() -> None:
    token = tokenize("word")[0]

    with pytest.raises(AttributeError):
        token.text = "other"  # type: ignore[misc]


def test_span_text_covers_contiguous_range() -> None:
    tokens = tokenize("Ahoj, svete.")

    assert span_text(tokens, {0, 1, 2, 3}) == "Ahoj, svete"
    assert span_text(tokens, []) == ""
