from concurrent.futures import ThreadPoolExecutor

from app.analysis.aggregator import AggregatedDocument, aggregate
from app.analysis.chunker import DEFAULT_MAX_CHUNK_SIZE, TextChunk, split_text
from app.analysis.extractor import ChunkExtractor, ExtractionContext, ExtractionResult
from app.infra.logger import get_logger

log = get_logger(__name__)


def process_document(
    text: str,
    context: ExtractionContext,
    extractor: ChunkExtractor,
    *,
    max_chunk_size: int = DEFAULT_MAX_CHUNK_SIZE,
    max_concurrency: int = 1,
) -> AggregatedDocument:
    """Split, extract every chunk, and join the outputs in document order."""

    chunks = split_text(text, max_chunk_size=max_chunk_size)
    log.info(
        "processing plan for %s (%s): %d chars, %d chunks",
        context.candidate_name,
        context.party,
        len(text),
        len(chunks),
    )

    if max_concurrency <= 1 or len(chunks) <= 1:
        results = [extractor.extract(ch, context) for ch in chunks]
    else:
        results = _extract_concurrently(chunks, context, extractor, max_concurrency)

    doc = aggregate(results)
    if doc.had_failures:
        log.warning("%d of %d chunks failed", len(doc.failed_chunks), doc.chunk_count)
    return doc


def _extract_concurrently(
    chunks: list[TextChunk],
    context: ExtractionContext,
    extractor: ChunkExtractor,
    max_concurrency: int,
) -> list[ExtractionResult]:
    # Each worker owns one slot; no shared append target.
    slots: list[ExtractionResult | None] = [None] * len(chunks)

    def _run(chunk: TextChunk) -> None:
        slots[chunk.index] = extractor.extract(chunk, context)

    with ThreadPoolExecutor(max_workers=max_concurrency) as pool:
        for fut in [pool.submit(_run, ch) for ch in chunks]:
            fut.result()

    return [r for r in slots if r is not None]
