import re

from fastapi import HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool

from app.analysis.extractor import ChunkExtractor, ExtractionContext, ExtractionSettings
from app.analysis.pipeline import process_document
from app.config import AppConfig
from app.features.plans.schemas import PlanIn
from app.infra.completion import CompletionClient
from app.infra.logger import get_logger
from app.infra.pdf_text import PdfDecodeError, extract_pdf_text, join_pages
from app.infra.repo_plans import ElectoralPlan, PlanRepo
from app.infra.storage import BlobStore

log = get_logger(__name__)

_HEADING_RE = re.compile(r"^\s{0,3}#{1,3}\s+(.+?)\s*#*\s*$", re.MULTILINE)


def plan_to_json(p: ElectoralPlan) -> dict[str, object]:
    return {
        "id": p.id,
        "candidate_name": p.candidate_name,
        "party": p.party,
        "summary": p.summary,
        "topics": p.topics,
        "proposals": p.proposals,
        "original_pdf": p.original_pdf,
        "had_failures": p.had_failures,
        "created_at": p.created_at,
        "updated_at": p.updated_at,
    }


def topics_from_markdown(markdown: str, limit: int = 20) -> list[str]:
    """Headings of the extracted proposals, in order, without duplicates."""

    seen: set[str] = set()
    topics: list[str] = []
    for m in _HEADING_RE.finditer(markdown):
        title = m.group(1).strip().strip("*_").strip()
        key = title.lower()
        if not title or key in seen:
            continue
        seen.add(key)
        topics.append(title)
        if len(topics) >= limit:
            break
    return topics


class PlansService:
    def __init__(self, *, conn) -> None:
        self._conn = conn

    async def list_plans(self, *, candidate_name: str | None) -> dict[str, object]:
        return {"items": [plan_to_json(p) for p in PlanRepo(self._conn).list(candidate_name=candidate_name)]}

    async def get_plan(self, *, plan_id: int) -> dict[str, object]:
        try:
            return plan_to_json(PlanRepo(self._conn).get(plan_id))
        except KeyError:
            raise HTTPException(status_code=404, detail="plan_not_found")

    async def create(self, *, body: PlanIn) -> dict[str, object]:
        plan = PlanRepo(self._conn).create(
            candidate_name=body.candidate_name,
            party=body.party,
            summary=body.summary,
            topics=body.topics,
            proposals=body.proposals,
        )
        return plan_to_json(plan)

    async def update(self, *, plan_id: int, body: PlanIn) -> dict[str, object]:
        try:
            plan = PlanRepo(self._conn).update(
                plan_id,
                candidate_name=body.candidate_name,
                party=body.party,
                summary=body.summary,
                topics=body.topics,
                proposals=body.proposals,
            )
        except KeyError:
            raise HTTPException(status_code=404, detail="plan_not_found")
        return plan_to_json(plan)

    async def delete(self, *, plan_id: int) -> dict[str, object]:
        try:
            PlanRepo(self._conn).delete(plan_id)
        except KeyError:
            raise HTTPException(status_code=404, detail="plan_not_found")
        return {"id": plan_id, "deleted": True}


class PlanExtractionService:
    """PDF upload -> text -> chunked LLM extraction -> stored electoral plan."""

    def __init__(self, *, conn, cfg: AppConfig, client: CompletionClient | None) -> None:
        self._conn = conn
        self._cfg = cfg
        self._client = client

    async def extract_from_pdf(self, *, candidate_name: str, party: str, file: UploadFile) -> dict[str, object]:
        if self._client is None:
            raise HTTPException(status_code=503, detail="completion_not_configured")

        candidate_name = candidate_name.strip()
        party = party.strip()
        if not candidate_name or not party:
            raise HTTPException(status_code=400, detail="candidate_name_and_party_required")

        filename = file.filename or ""
        if not filename.lower().endswith(".pdf"):
            raise HTTPException(status_code=400, detail="only_pdf_supported")

        data = await file.read()
        if not data:
            raise HTTPException(status_code=400, detail="empty_file")

        try:
            pages = await run_in_threadpool(
                extract_pdf_text, data, ocr_enabled=self._cfg.ocr_enabled, ocr_lang=self._cfg.ocr_lang
            )
        except PdfDecodeError as e:
            log.warning("rejecting upload %s: %s", filename, e)
            raise HTTPException(status_code=400, detail="invalid_pdf")

        text = join_pages(pages)
        if not text.strip():
            raise HTTPException(status_code=422, detail="no_text_extracted")

        blob = BlobStore(self._cfg.blobs_dir).put_bytes(data, filename=filename)

        extractor = ChunkExtractor(
            client=self._client,
            settings=ExtractionSettings(
                model=self._cfg.extraction_model,
                temperature=self._cfg.extraction_temperature,
            ),
        )
        doc = await run_in_threadpool(
            process_document,
            text,
            ExtractionContext(candidate_name=candidate_name, party=party),
            extractor,
            max_chunk_size=self._cfg.max_chunk_size,
            max_concurrency=self._cfg.extraction_max_concurrency,
        )

        plan = PlanRepo(self._conn).create(
            candidate_name=candidate_name,
            party=party,
            summary=f"Electoral plan for {candidate_name} ({party})",
            topics=topics_from_markdown(doc.content),
            proposals=doc.content,
            original_pdf=blob.filename,
            had_failures=doc.had_failures,
        )
        log.info(
            "stored plan %d for %s: %d pages, %d chunks, %d failed",
            plan.id,
            candidate_name,
            len(pages),
            doc.chunk_count,
            len(doc.failed_chunks),
        )

        return {
            **plan_to_json(plan),
            "sha256": blob.sha256,
            "page_count": len(pages),
            "ocr_pages": sum(1 for p in pages if p.ocr_applied),
            "chunk_count": doc.chunk_count,
            "failed_chunks": [i + 1 for i in doc.failed_chunks],
        }
