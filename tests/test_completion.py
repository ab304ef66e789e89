from types import SimpleNamespace

import httpx
import openai
import pytest

from app.infra.completion import ChatMessage, CompletionError, OpenAICompletionClient

_REQ = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _client(monkeypatch, create) -> OpenAICompletionClient:
    client = OpenAICompletionClient(api_key="sk-test", timeout=5)
    monkeypatch.setattr(client._client.chat.completions, "create", create)
    return client


def _reply(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_returns_content_and_sends_messages(monkeypatch) -> None:
    seen = {}

    def create(**kwargs):
        seen.update(kwargs)
        return _reply("## Economia")

    client = _client(monkeypatch, create)
    out = client.complete(
        "sys",
        "pergunta",
        model="gpt-4o",
        temperature=0.5,
        history=[ChatMessage(role="assistant", content="antes")],
    )

    assert out == "## Economia"
    assert seen["model"] == "gpt-4o"
    assert seen["temperature"] == 0.5
    assert [m["role"] for m in seen["messages"]] == ["system", "assistant", "user"]
    assert seen["messages"][-1]["content"] == "pergunta"


def test_empty_content_is_an_error(monkeypatch) -> None:
    client = _client(monkeypatch, lambda **_: _reply(""))

    with pytest.raises(CompletionError, match="no content"):
        client.complete("s", "u", model="m", temperature=0)


def test_status_error_keeps_status_and_message(monkeypatch) -> None:
    def create(**_):
        raise openai.APIStatusError(
            "rate limited",
            response=httpx.Response(429, request=_REQ),
            body={"error": {"message": "Rate limit reached"}},
        )

    client = _client(monkeypatch, create)

    with pytest.raises(CompletionError) as exc:
        client.complete("s", "u", model="m", temperature=0)
    assert exc.value.status == 429
    assert exc.value.short() == "HTTP 429: Rate limit reached"


def test_connection_error_is_wrapped(monkeypatch) -> None:
    def create(**_):
        raise openai.APIConnectionError(request=_REQ)

    client = _client(monkeypatch, create)

    with pytest.raises(CompletionError) as exc:
        client.complete("s", "u", model="m", temperature=0)
    assert exc.value.status is None
    assert exc.value.message.startswith("connection failed")


@pytest.mark.parametrize(
    "choice",
    [
        SimpleNamespace(index=0),
        SimpleNamespace(message=None),
        SimpleNamespace(message=SimpleNamespace()),
        SimpleNamespace(message=SimpleNamespace(content=["not", "text"])),
    ],
)
def test_malformed_choice_is_an_error(monkeypatch, choice) -> None:
    client = _client(monkeypatch, lambda **_: SimpleNamespace(choices=[choice]))

    with pytest.raises(CompletionError, match="no content"):
        client.complete("s", "u", model="m", temperature=0)


def test_malformed_reply_becomes_placeholder_and_later_chunks_run(monkeypatch) -> None:
    from app.analysis.extractor import FAILURE_MARKER, ChunkExtractor, ExtractionContext
    from app.analysis.pipeline import process_document

    replies = iter(
        [
            SimpleNamespace(choices=[SimpleNamespace(index=0)]),
            _reply("## Parte 2"),
            _reply("## Parte 3"),
        ]
    )
    client = _client(monkeypatch, lambda **_: next(replies))

    doc = process_document(
        "a" * 30,
        ExtractionContext(candidate_name="Ana Silva", party="Partido Exemplo"),
        ChunkExtractor(client=client),
        max_chunk_size=10,
    )

    assert doc.chunk_count == 3
    assert doc.failed_chunks == [0]
    parts = doc.content.split("\n\n")
    assert parts[0].startswith(FAILURE_MARKER)
    assert parts[1:] == ["## Parte 2", "## Parte 3"]
