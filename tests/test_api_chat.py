from app.features.chat.fallback import FALLBACK_PROPOSALS, detect_party
from app.infra.completion import CompletionError


def test_chat_forwards_history(make_client, completion_factory) -> None:
    completion = completion_factory({0: "O PS propõe..."})
    client = make_client(completion=completion, chat_model="chat-m")

    resp = client.post(
        "/chat",
        json={
            "messages": [
                {"role": "user", "content": "Olá"},
                {"role": "assistant", "content": "Olá! Como posso ajudar?"},
                {"role": "user", "content": "O que propõe o PS?"},
            ],
            "temperature": 0.3,
        },
    )

    assert resp.status_code == 200
    assert resp.json() == {"role": "assistant", "content": "O PS propõe...", "model": "chat-m", "fallback": False}
    call = completion.calls[0]
    assert call["user_prompt"] == "O que propõe o PS?"
    assert call["temperature"] == 0.3
    assert [m.role for m in call["history"]] == ["user", "assistant"]


def test_chat_falls_back_to_party_proposals(make_client, completion_factory) -> None:
    completion = completion_factory({0: CompletionError("upstream down", status=502)})
    client = make_client(completion=completion)

    body = client.post("/chat", json={"messages": [{"role": "user", "content": "E o Chega?"}]}).json()

    assert body["fallback"] is True
    assert body["content"].startswith("• ")
    assert FALLBACK_PROPOSALS["chega"][0] in body["content"]


def test_chat_without_client_uses_general_fallback(make_client) -> None:
    client = make_client(completion=None)

    body = client.post("/chat", json={"messages": [{"role": "user", "content": "Quando são as eleições?"}]}).json()

    assert body["fallback"] is True
    assert FALLBACK_PROPOSALS["geral"][0] in body["content"]


def test_chat_requires_last_message_from_user(make_client, fake_completion) -> None:
    client = make_client(completion=fake_completion)

    resp = client.post("/chat", json={"messages": [{"role": "assistant", "content": "Olá"}]})

    assert resp.status_code == 400


def test_detect_party_uses_whole_words() -> None:
    assert detect_party("Propostas do PSD para a saúde") == "psd"
    assert detect_party("o partido socialista") == "ps"
    assert detect_party("Iniciativa Liberal e impostos") == "il"
    assert detect_party("bem-estar e habitação") == "geral"
