from dataclasses import dataclass

from app.analysis.chunker import TextChunk
from app.infra.completion import CompletionClient, CompletionError
from app.infra.logger import get_logger

log = get_logger(__name__)

FAILURE_MARKER = "[EXTRACTION_FAILED]"

SYSTEM_PROMPT = (
    "Você é um especialista em análise de programas eleitorais políticos. "
    "Analise o conteúdo fornecido e extraia as propostas principais, organizadas por "
    "categorias como economia, saúde, educação, etc. Formate o texto em Markdown."
)


@dataclass(frozen=True)
class ExtractionContext:
    candidate_name: str
    party: str


@dataclass(frozen=True)
class ExtractionSettings:
    model: str = "gpt-4o"
    temperature: float = 0.5


@dataclass(frozen=True)
class ExtractionResult:
    index: int
    content: str
    ok: bool
    error: str | None = None


def build_user_prompt(chunk: TextChunk, context: ExtractionContext) -> str:
    part = ""
    if chunk.total > 1:
        part = (
            f" Esta é a parte {chunk.part_number} de {chunk.total} do documento; "
            "extraia apenas as propostas presentes nesta parte."
        )
    return (
        f"Analise este programa eleitoral do partido {context.party} e do candidato "
        f"{context.candidate_name}. Extraia e resuma as propostas principais organizadas "
        f"por categoria. Formate em Markdown.{part} Conteúdo do PDF:\n\n{chunk.text}"
    )


def failure_placeholder(chunk: TextChunk, error: str) -> str:
    return f"{FAILURE_MARKER} Parte {chunk.part_number} de {chunk.total} não processada: {error}"


class ChunkExtractor:
    def __init__(self, *, client: CompletionClient, settings: ExtractionSettings | None = None) -> None:
        self._client = client
        self._settings = settings or ExtractionSettings()

    def extract(self, chunk: TextChunk, context: ExtractionContext) -> ExtractionResult:
        """Run one completion for `chunk`.

        Service failures never propagate: they come back as a result with
        `ok=False` whose content is a marked placeholder, so the remaining
        chunks still get processed.
        """

        try:
            content = self._client.complete(
                SYSTEM_PROMPT,
                build_user_prompt(chunk, context),
                model=self._settings.model,
                temperature=self._settings.temperature,
            )
        except CompletionError as e:
            error = e.short()
            log.warning("chunk %d/%d failed: %s", chunk.part_number, chunk.total, error)
            return ExtractionResult(
                index=chunk.index,
                content=failure_placeholder(chunk, error),
                ok=False,
                error=error,
            )

        return ExtractionResult(index=chunk.index, content=content.strip(), ok=True)
