"""
Gemini text-generation client.

Wraps LangChain's ChatGoogleGenerativeAI behind a single async call that
returns plain text. Every provider failure is raised as UpstreamModelError;
choosing a substitute value is the caller's decision.

Dependencies: langchain_google_genai, langchain_core
System role: Boundary adapter for the hosted text model
"""

import logging
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_google_genai import ChatGoogleGenerativeAI

from visualsuite.core.exceptions import UpstreamModelError

logger = logging.getLogger(__name__)

PROVIDER = "gemini"


def _message_text(content: Any) -> str:
    """Flatten LangChain message content (str or list of parts) to text."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(str(part.get("text", "")))
        return "".join(parts)
    return str(content or "")


class TextModelClient:
    """Async text-generation client for Gemini.

    The chat model is created on first use so a missing credential surfaces
    as a failed call (and therefore a fallback) rather than a startup crash.
    """

    def __init__(
        self,
        api_key: str | None,
        model_name: str = "gemini-1.5-flash",
        temperature: float = 0.7,
        chat_model: BaseChatModel | None = None,
    ) -> None:
        """Initialize client.

        Args:
            api_key: Google API key for Gemini access
            model_name: Gemini model ID
            temperature: Sampling temperature
            chat_model: Prebuilt chat model (tests inject fakes here)
        """
        self.model_name = model_name
        self.temperature = temperature
        self._api_key = api_key
        self._chat_model = chat_model

    def _get_chat_model(self) -> BaseChatModel:
        if self._chat_model is None:
            if not self._api_key:
                raise UpstreamModelError(
                    "Gemini API key is not configured", provider=PROVIDER
                )
            self._chat_model = ChatGoogleGenerativeAI(
                model=self.model_name,
                google_api_key=self._api_key,
                temperature=self.temperature,
            )
            logger.info(f"{__name__}:_get_chat_model - Initialized {self.model_name}")
        return self._chat_model

    async def generate(self, prompt: str) -> str:
        """Send one prompt to the model and return its trimmed text.

        Args:
            prompt: Fully built instruction

        Returns:
            str: Model output, whitespace-trimmed

        Raises:
            UpstreamModelError: Construction, transport or provider failure,
                or an empty response
        """
        try:
            model = self._get_chat_model()
            response = await model.ainvoke([HumanMessage(content=prompt)])
        except UpstreamModelError:
            raise
        except Exception as e:
            raise UpstreamModelError(
                f"Gemini request failed: {type(e).__name__}: {e}",
                provider=PROVIDER,
            ) from e

        text = _message_text(response.content).strip()
        if not text:
            raise UpstreamModelError("Gemini returned an empty response", provider=PROVIDER)
        return text
