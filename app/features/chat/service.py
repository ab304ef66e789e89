from fastapi import HTTPException
from starlette.concurrency import run_in_threadpool

from app.config import AppConfig
from app.domain.enums import ChatRole
from app.features.chat.fallback import fallback_answer
from app.features.chat.schemas import ChatIn
from app.infra.completion import ChatMessage, CompletionClient, CompletionError
from app.infra.logger import get_logger

log = get_logger(__name__)

SYSTEM_PROMPT = (
    "Você é um assistente especializado em política portuguesa. Você fornece informações "
    "precisas sobre candidatos políticos, partidos e propostas eleitorais em Portugal. "
    "Todos os seus exemplos e referências devem ser relevantes para o contexto político "
    "português. Sempre dê respostas em português europeu."
)


class ChatService:
    def __init__(self, *, cfg: AppConfig, client: CompletionClient | None) -> None:
        self._cfg = cfg
        self._client = client

    async def ask(self, *, body: ChatIn) -> dict[str, object]:
        last = body.messages[-1]
        if last.role != ChatRole.user.value:
            raise HTTPException(status_code=400, detail="last_message_must_be_from_user")

        history = [ChatMessage(role=m.role, content=m.content) for m in body.messages[:-1]]
        temperature = self._cfg.chat_temperature if body.temperature is None else body.temperature

        if self._client is None:
            log.warning("chat fallback: completion client not configured")
            return self._fallback(last.content, "completion_not_configured")

        try:
            content = await run_in_threadpool(
                self._client.complete,
                SYSTEM_PROMPT,
                last.content,
                model=self._cfg.chat_model,
                temperature=temperature,
                history=history,
            )
        except CompletionError as e:
            log.warning("chat fallback: %s", e.short())
            return self._fallback(last.content, e.short())

        return {"role": ChatRole.assistant.value, "content": content, "model": self._cfg.chat_model, "fallback": False}

    def _fallback(self, message: str, reason: str) -> dict[str, object]:
        return {
            "role": ChatRole.assistant.value,
            "content": fallback_answer(message),
            "model": "fallback",
            "fallback": True,
            "error": reason,
        }
