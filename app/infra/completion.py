from dataclasses import dataclass
from typing import Any, Protocol, Sequence

import openai
from openai import OpenAI


@dataclass(frozen=True)
class ChatMessage:
    role: str
    content: str


class CompletionError(Exception):
    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def short(self) -> str:
        if self.status is not None:
            return f"HTTP {self.status}: {self.message}"
        return self.message


class CompletionClient(Protocol):
    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        model: str,
        temperature: float,
        history: Sequence[ChatMessage] = (),
    ) -> str: ...


class OpenAICompletionClient:
    """Chat-completions adapter.

    One attempt per call: SDK retries are disabled and every request is bounded
    by `timeout` seconds. Every failure mode surfaces as `CompletionError`.
    """

    def __init__(self, *, api_key: str, timeout: float = 60.0, base_url: str | None = None) -> None:
        self._client = OpenAI(api_key=api_key, base_url=base_url, timeout=timeout, max_retries=0)

    def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        *,
        model: str,
        temperature: float,
        history: Sequence[ChatMessage] = (),
    ) -> str:
        messages: list[dict[str, Any]] = [{"role": "system", "content": system_prompt}]
        messages.extend({"role": m.role, "content": m.content} for m in history)
        messages.append({"role": "user", "content": user_prompt})

        try:
            response = self._client.chat.completions.create(
                model=model,
                messages=messages,  # type: ignore[arg-type]
                temperature=temperature,
            )
        except openai.APIStatusError as e:
            raise CompletionError(_error_message(e), status=e.status_code) from e
        except openai.APITimeoutError as e:
            raise CompletionError("request timed out") from e
        except openai.APIConnectionError as e:
            raise CompletionError(f"connection failed: {e}") from e
        except openai.OpenAIError as e:
            raise CompletionError(f"{type(e).__name__}: {e}") from e

        if not response.choices:
            raise CompletionError("no choices in completion response")
        # Tolerate partial payloads: a choice without message or content.
        message = getattr(response.choices[0], "message", None)
        content = getattr(message, "content", None)
        if not isinstance(content, str) or not content.strip():
            raise CompletionError("no content in completion response")
        return content


def _error_message(e: openai.APIStatusError) -> str:
    body = e.body
    if isinstance(body, dict):
        err = body.get("error", body)
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
    return e.message or "unknown error"
