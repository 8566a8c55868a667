"""Unit tests for fixed-window text chunking."""

import pytest

from laura.application.services.chunking import TextChunk, chunk_text


def test_empty_text_yields_no_chunks():
    assert chunk_text("") == []


def test_whitespace_only_text_yields_no_chunks():
    assert chunk_text("   \n\t  ") == []


def test_short_text_is_single_chunk():
    chunks = chunk_text("hello world")

    assert chunks == [TextChunk(index=0, text="hello world")]


def test_windows_overlap_by_configured_amount():
    text = "".join(chr(ord("a") + i % 26) for i in range(2000))

    chunks = chunk_text(text, chunk_size=800, chunk_overlap=100)

    assert [c.index for c in chunks] == [0, 1, 2]
    assert chunks[0].text == text[0:800]
    assert chunks[1].text == text[700:1500]
    assert chunks[2].text == text[1400:2000]
    assert chunks[0].text[-100:] == chunks[1].text[:100]


@pytest.mark.parametrize("length", [1, 799, 800, 801, 1500, 1501, 4321])
def test_chunk_count_matches_window_starts(length):
    """Non-blank text yields one chunk per window start, and windows cover every position."""
    text = "x" * length
    step = 800 - 100

    chunks = chunk_text(text)

    starts = list(range(0, length, step))
    assert len(chunks) == len(starts) >= 1
    covered = set()
    for start in starts:
        covered.update(range(start, min(start + 800, length)))
    assert covered == set(range(length))


def test_blank_windows_are_dropped_without_consuming_an_index():
    text = "a" + " " * 1500 + "b"

    chunks = chunk_text(text)

    assert chunks == [TextChunk(index=0, text="a"), TextChunk(index=1, text="b")]


def test_chunks_are_trimmed():
    chunks = chunk_text("   padded text   ")

    assert chunks[0].text == "padded text"


def test_chunking_is_deterministic():
    text = "The quick brown fox jumps over the lazy dog. " * 80

    assert chunk_text(text) == chunk_text(text)


def test_invalid_overlap_is_rejected():
    with pytest.raises(ValueError):
        chunk_text("some text", chunk_size=100, chunk_overlap=100)

    with pytest.raises(ValueError):
        chunk_text("some text", chunk_size=0, chunk_overlap=0)
