"""Tests for the shared tokenizer and sentence splitter."""

from qa_engine.text.tokenizer import iter_tokens, split_sentences, tokenize


def test_tokenize_basic():
    tokens = tokenize("The quick brown fox jumps over the lazy dog")
    assert "quick" in tokens
    assert "brown" in tokens
    assert "fox" in tokens
    # Stopwords removed
    assert "the" not in tokens
    assert "over" not in tokens


def test_tokenize_lowercase():
    tokens = tokenize("Hello World")
    assert "hello" in tokens
    assert "world" in tokens


def test_tokenize_drops_wh_words():
    assert tokenize("Who developed the Macintosh computer?") == [
        "developed",
        "macintosh",
        "computer",
    ]


def test_tokenize_empty():
    assert tokenize("") == []
    assert tokenize("   ") == []


def test_tokenize_all_stopwords():
    assert tokenize("Who is it?") == []


def test_iter_tokens_offsets():
    text = "Apple, in 1984."
    tokens = list(iter_tokens(text))
    assert [t for t, _, _ in tokens] == ["Apple", "in", "1984"]
    for token, start, end in tokens:
        assert text[start:end] == token


def test_split_sentences_offsets():
    text = "  First one.  Second one!\nThird?"
    bounds = split_sentences(text)
    assert [text[s:e] for s, e in bounds] == ["First one.", "Second one!", "Third?"]


def test_split_sentences_empty():
    assert split_sentences("") == []
    assert split_sentences("   \n ") == []
