import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


@dataclass(frozen=True)
class AppConfig:
    data_dir: Path
    admin_secret: str
    openai_api_key: str | None = None
    openai_timeout_seconds: float = 60.0
    extraction_model: str = "gpt-4o"
    extraction_temperature: float = 0.5
    chat_model: str = "gpt-4o-mini"
    chat_temperature: float = 0.7
    max_chunk_size: int = 90_000
    extraction_max_concurrency: int = 1
    ocr_enabled: bool = True
    ocr_lang: str = "por"

    @property
    def db_path(self) -> Path:
        return self.data_dir / "app.sqlite3"

    @property
    def blobs_dir(self) -> Path:
        return self.data_dir


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_config() -> AppConfig:
    load_dotenv()
    return AppConfig(
        data_dir=Path(os.getenv("DATA_DIR", "data")),
        admin_secret=os.getenv("ADMIN_SECRET", "dev-secret"),
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        openai_timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "60")),
        extraction_model=os.getenv("EXTRACTION_MODEL", "gpt-4o"),
        extraction_temperature=float(os.getenv("EXTRACTION_TEMPERATURE", "0.5")),
        chat_model=os.getenv("CHAT_MODEL", "gpt-4o-mini"),
        chat_temperature=float(os.getenv("CHAT_TEMPERATURE", "0.7")),
        max_chunk_size=int(os.getenv("MAX_CHUNK_SIZE", "90000")),
        extraction_max_concurrency=int(os.getenv("EXTRACTION_MAX_CONCURRENCY", "1")),
        ocr_enabled=_env_bool("OCR_ENABLED", True),
        ocr_lang=os.getenv("OCR_LANG", "por"),
    )
