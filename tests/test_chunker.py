import pytest

from app.analysis.chunker import split_text


def _join(chunks) -> str:
    return "".join(c.text for c in chunks)


def test_short_document_is_a_single_chunk() -> None:
    text = "Propostas para a saúde.\n\nPropostas para a educação."
    chunks = split_text(text, max_chunk_size=1000)

    assert len(chunks) == 1
    assert chunks[0].text == text
    assert (chunks[0].start, chunks[0].end, chunks[0].index, chunks[0].total) == (0, len(text), 0, 1)


def test_document_exactly_at_limit_is_a_single_chunk() -> None:
    text = "x" * 500
    chunks = split_text(text, max_chunk_size=500)

    assert len(chunks) == 1
    assert chunks[0].text == text


def test_empty_document_yields_no_chunks() -> None:
    assert split_text("", max_chunk_size=100) == []


def test_hard_cut_without_natural_breaks() -> None:
    text = "a" * 250_000
    chunks = split_text(text, max_chunk_size=90_000)

    assert [len(c.text) for c in chunks] == [90_000, 90_000, 70_000]
    assert all(c.total == 3 for c in chunks)
    assert [c.index for c in chunks] == [0, 1, 2]
    assert _join(chunks) == text
    for prev, nxt in zip(chunks, chunks[1:]):
        assert prev.end == nxt.start


def test_prefers_paragraph_break_over_sentence_break() -> None:
    first = "a" * 700 + ". " + "b" * 100 + "\n\n" + "c" * 50 + ". "
    text = first + "d" * 600
    chunks = split_text(text, max_chunk_size=1000, boundary_window=1000)

    assert chunks[0].text.endswith("b" * 100 + "\n\n")
    assert _join(chunks) == text


def test_falls_back_to_sentence_break() -> None:
    text = "a" * 900 + ". " + "b" * 500
    chunks = split_text(text, max_chunk_size=1000)

    assert chunks[0].text == "a" * 900 + ". "
    assert chunks[1].text == "b" * 500


def test_break_outside_window_is_ignored() -> None:
    text = "a" * 10 + "\n\n" + "b" * 2000
    chunks = split_text(text, max_chunk_size=1500, boundary_window=100)

    assert len(chunks[0].text) == 1500
    assert _join(chunks) == text


@pytest.mark.parametrize("max_size", [1, 7, 64, 333, 1000])
def test_chunks_cover_document_without_gaps(max_size: int) -> None:
    text = ("Primeira frase. Segunda frase.\n\nNovo parágrafo com texto corrido " * 40).strip()
    chunks = split_text(text, max_chunk_size=max_size, boundary_window=50)

    assert _join(chunks) == text
    assert all(0 < len(c.text) <= max_size for c in chunks)
    assert chunks[0].start == 0
    assert chunks[-1].end == len(text)


def test_rejects_non_positive_size() -> None:
    with pytest.raises(ValueError):
        split_text("abc", max_chunk_size=0)
