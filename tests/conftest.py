import sys
from pathlib import Path
from typing import Sequence

import pytest


def pytest_configure() -> None:
    # Ensure `import app...` works without installing the package.
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


class FakeCompletion:
    """Scripted stand-in for the completion service.

    `replies` maps a call number (0-based) to either a string or an exception
    to raise; calls without an entry echo a short summary of the prompt.
    """

    def __init__(self, replies: dict[int, object] | None = None) -> None:
        self.replies = replies or {}
        self.calls: list[dict[str, object]] = []

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        model: str,
        temperature: float,
        history: Sequence[object] = (),
    ) -> str:
        n = len(self.calls)
        self.calls.append(
            {
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "model": model,
                "temperature": temperature,
                "history": list(history),
            }
        )
        reply = self.replies.get(n, f"## Parte {n + 1}\n- resumo")
        if isinstance(reply, Exception):
            raise reply
        return str(reply)


@pytest.fixture
def fake_completion() -> FakeCompletion:
    return FakeCompletion()


@pytest.fixture
def make_client(tmp_path: Path):
    from fastapi.testclient import TestClient

    from app.config import AppConfig
    from app.main import create_app

    def _make(completion=None, **overrides) -> TestClient:
        cfg = AppConfig(
            data_dir=tmp_path,
            admin_secret="test-secret",
            ocr_enabled=False,
            **overrides,
        )
        return TestClient(create_app(cfg, completion=completion))

    return _make


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"X-Admin-Secret": "test-secret"}


@pytest.fixture
def completion_factory():
    return FakeCompletion
