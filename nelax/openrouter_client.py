import logging
from typing import Optional

import httpx

from nelax.config import DEFAULT_MODEL, OPENROUTER_CHAT_COMPLETIONS_URL, Settings

logger = logging.getLogger(__name__)


class CompletionError(RuntimeError):
    """Raised when the chat-completion API cannot produce an answer."""


class OpenRouterClient:
    def __init__(
        self,
        api_key: Optional[str],
        *,
        url: str = OPENROUTER_CHAT_COMPLETIONS_URL,
        model: str = DEFAULT_MODEL,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.url = url
        self.model = model
        self._timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "OpenRouterClient":
        return cls(
            settings.openrouter_api_key,
            url=settings.openrouter_api_url,
            model=settings.openrouter_model,
            timeout=settings.openrouter_timeout,
            transport=transport,
        )

    async def complete(self, system: str, user: str) -> str:
        if not self.api_key:
            raise CompletionError("Missing OPENROUTER_API_KEY")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "messages": self._build_messages(system, user),
        }

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            try:
                response = await client.post(self.url, headers=headers, json=payload)
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                status_code = exc.response.status_code
                logger.warning("Completion API returned HTTP %s", status_code)
                raise CompletionError(self._format_error(status_code)) from exc
            except httpx.RequestError as exc:
                raise CompletionError("Unable to reach completion API") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise CompletionError("Completion API returned invalid JSON") from exc

        if not isinstance(data, dict):
            raise CompletionError("Unexpected completion response format")

        text = []
        for choice in data.get("choices") or []:
            if not isinstance(choice, dict):
                continue
            message = choice.get("message")
            if isinstance(message, dict):
                content_piece = message.get("content")
                if content_piece:
                    text.append(str(content_piece))

        return "".join(text).strip()

    def _format_error(self, status_code: int) -> str:
        if status_code in (401, 403):
            return "Completion API rejected the request. Check the API key and its permissions."
        if status_code == 429:
            return "Completion API rate limit exceeded. Please try again shortly."
        if 500 <= status_code < 600:
            return "Completion API is currently unavailable. Please retry later."
        return f"Unexpected completion API error (HTTP {status_code})."

    def _build_messages(self, system: str, user: str) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": system},
            {"role": "user", "content": user},
        ]
