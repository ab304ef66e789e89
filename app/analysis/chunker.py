from dataclasses import dataclass

DEFAULT_MAX_CHUNK_SIZE = 90_000
DEFAULT_BOUNDARY_WINDOW = 1000

_PARAGRAPH_BREAK = "\n\n"
_SENTENCE_BREAK = ". "


@dataclass(frozen=True)
class TextChunk:
    index: int
    total: int
    start: int
    end: int
    text: str

    @property
    def part_number(self) -> int:
        return self.index + 1


def split_text(
    text: str,
    max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE,
    boundary_window: int = DEFAULT_BOUNDARY_WINDOW,
) -> list[TextChunk]:
    """Split `text` into contiguous chunks of at most `max_chunk_size` characters.

    Cuts prefer a paragraph break, then a sentence break, found in the last
    `boundary_window` characters before the size limit. Without either, the
    chunk is cut exactly at the limit (possibly mid-word).

    Joining every chunk's text in order gives back `text` unchanged. An empty
    document yields no chunks.
    """

    if max_chunk_size <= 0:
        raise ValueError("max_chunk_size must be positive")

    if not text:
        return []

    if len(text) <= max_chunk_size:
        return [TextChunk(index=0, total=1, start=0, end=len(text), text=text)]

    spans: list[tuple[int, int]] = []
    start = 0
    while start < len(text):
        end = min(start + max_chunk_size, len(text))
        if end < len(text):
            end = _natural_cut(text, start=start, end=end, window=boundary_window)
        spans.append((start, end))
        start = end

    total = len(spans)
    return [
        TextChunk(index=i, total=total, start=s, end=e, text=text[s:e])
        for i, (s, e) in enumerate(spans)
    ]


def _natural_cut(text: str, *, start: int, end: int, window: int) -> int:
    lo = max(start, end - window)

    pos = text.rfind(_PARAGRAPH_BREAK, lo, end)
    if pos != -1:
        return pos + len(_PARAGRAPH_BREAK)

    pos = text.rfind(_SENTENCE_BREAK, lo, end)
    if pos != -1:
        return pos + len(_SENTENCE_BREAK)

    # Hard cut.
    return end
