import logging
import re
from typing import Protocol

from openai import AsyncOpenAI

from rulesmith.agent.errors import CredentialMissingError, GenerationFailure
from rulesmith.core.config import settings

logger = logging.getLogger(__name__)


def _strip_markdown_fence(text: str) -> str:
    """Drop a ```markdown fence some models wrap around the whole document."""
    if not text:
        return ""
    fenced = re.match(r"^\s*```(?:markdown|md)\s*\n([\s\S]*?)\n\s*```\s*$", text, re.IGNORECASE)
    if fenced:
        return fenced.group(1).strip()
    return text.strip()


class GenerationBackend(Protocol):
    """Anything that can turn a prompt into generated text."""

    async def generate_content(self, prompt: str) -> str: ...


class GeminiBackend:
    """Gemini text generation over its OpenAI-compatible chat completions API."""

    def __init__(
        self,
        api_key: str | None = None,
        model_name: str | None = None,
        base_url: str | None = None,
        temperature: float | None = None,
    ):
        self.api_key = api_key if api_key is not None else (settings.GEMINI_API_KEY or settings.LLM_API_KEY)
        self.model_name = model_name or settings.MODEL_DEFAULT
        self.base_url = base_url or settings.LLM_BASE_URL
        self.temperature = settings.LLM_TEMPERATURE if temperature is None else temperature
        self._client: AsyncOpenAI | None = None

    @property
    def client(self) -> AsyncOpenAI:
        if not self.api_key:
            raise CredentialMissingError("GEMINI_API_KEY not set")
        if self._client is None:
            self._client = AsyncOpenAI(base_url=self.base_url, api_key=self.api_key)
        return self._client

    async def generate_content(self, prompt: str) -> str:
        client = self.client
        logger.info("Issuing text request to model %s...", self.model_name)
        response = await client.chat.completions.create(
            model=self.model_name,
            messages=[{"role": "user", "content": prompt}],
            temperature=self.temperature,
        )

        if not getattr(response, "choices", None):
            logger.error("Received 0 choices from %s: %s", self.model_name, response)
            raise GenerationFailure(f"Provider {self.model_name} returned no output")

        text_response = _strip_markdown_fence(response.choices[0].message.content or "")
        if not text_response:
            raise GenerationFailure(f"Model {self.model_name} returned empty content")

        logger.info("Successfully received text response from %s.", self.model_name)
        return text_response


async def invoke_generation(backend: GenerationBackend, prompt: str) -> str:
    """
    Call the backend exactly once.
    Any error is re-raised as a GenerationFailure carrying the original message and stack.
    """
    try:
        return await backend.generate_content(prompt)
    except GenerationFailure:
        raise
    except Exception as exc:
        raise GenerationFailure.from_exception(exc) from exc
