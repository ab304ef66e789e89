from dataclasses import dataclass
from typing import Iterable

from app.analysis.extractor import ExtractionResult

SEPARATOR = "\n\n"


@dataclass(frozen=True)
class AggregatedDocument:
    content: str
    had_failures: bool
    chunk_count: int
    failed_chunks: list[int]


def aggregate(results: Iterable[ExtractionResult]) -> AggregatedDocument:
    ordered = sorted(results, key=lambda r: r.index)
    failed = [r.index for r in ordered if not r.ok]
    return AggregatedDocument(
        content=SEPARATOR.join(r.content for r in ordered),
        had_failures=bool(failed),
        chunk_count=len(ordered),
        failed_chunks=failed,
    )
