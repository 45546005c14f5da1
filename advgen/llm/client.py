"""LLM client wrappers used for AI adventure generation."""

import logging
import os
from dataclasses import dataclass
from typing import Protocol

from ollama import AsyncClient, Client
from openai import AsyncOpenAI, OpenAI

from ..config import LLMConfig

logger = logging.getLogger(__name__)

# Local OpenAI-compatible servers accept any key, but the SDK refuses None
PLACEHOLDER_API_KEY = "sk-local"


@dataclass
class GenerationConfig:
    """Configuration for text generation."""

    temperature: float = 0.7
    max_tokens: int = 512
    top_p: float = 0.9


@dataclass
class GenerationResult:
    """Result of a text generation."""

    content: str
    model: str
    prompt_eval_count: int | None = None  # tokens in prompt
    eval_count: int | None = None  # tokens generated


class LLMClient(Protocol):
    """What the adventure generator needs from a client."""

    model: str

    def is_available(self) -> bool: ...

    async def agenerate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        config: GenerationConfig | None = None,
    ) -> GenerationResult: ...


def _build_messages(prompt: str, system_prompt: str | None) -> list[dict]:
    messages = []
    if system_prompt:
        messages.append({"role": "system", "content": system_prompt})
    messages.append({"role": "user", "content": prompt})
    return messages


class OllamaClient:
    """Wrapper around the Ollama client."""

    def __init__(
        self,
        model: str = "hermes3:latest",
        base_url: str = "http://localhost:11434",
        timeout: float = 120.0,
    ):
        """Initialize the Ollama client.

        Args:
            model: Model name to use
            base_url: Ollama server URL
            timeout: Request timeout in seconds
        """
        self.model = model
        self.base_url = base_url
        self.timeout = timeout

        self._client = Client(host=base_url, timeout=timeout)
        self._async_client = AsyncClient(host=base_url, timeout=timeout)

    def is_available(self) -> bool:
        """Check if the Ollama server is up and the model is pulled."""
        try:
            response = self._client.list()
            # Handle both dict and object responses from ollama client
            if hasattr(response, "models"):
                model_names = [m.model for m in response.models]
            else:
                model_names = [m.get("name", m.get("model", "")) for m in response.get("models", [])]
            base_model = self.model.split(":")[0]
            return any(self.model in name or base_model in name for name in model_names)
        except Exception as e:
            logger.info("Ollama at %s not available: %s", self.base_url, e)
            return False

    async def agenerate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        config: GenerationConfig | None = None,
    ) -> GenerationResult:
        """Async generate a response from a prompt.

        Args:
            prompt: The user prompt
            system_prompt: Optional system prompt
            config: Generation configuration

        Returns:
            GenerationResult with the response
        """
        config = config or GenerationConfig()

        response = await self._async_client.chat(
            model=self.model,
            messages=_build_messages(prompt, system_prompt),
            options={
                "temperature": config.temperature,
                "num_predict": config.max_tokens,
                "top_p": config.top_p,
            },
        )

        return GenerationResult(
            content=response["message"]["content"],
            model=response.get("model", self.model),
            prompt_eval_count=response.get("prompt_eval_count"),
            eval_count=response.get("eval_count"),
        )


class OpenAIClient:
    """Wrapper around the OpenAI client, for OpenAI or any compatible server."""

    def __init__(
        self,
        model: str = "gpt-4",
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float = 120.0,
    ):
        """Initialize the OpenAI client.

        Args:
            model: Model name to use
            base_url: API root, e.g. http://localhost:8080/v1. None means api.openai.com
            api_key: API key (defaults to OPENAI_API_KEY env var)
            timeout: Request timeout in seconds
        """
        self.model = model
        self.base_url = base_url
        self.api_key = api_key or os.environ.get("OPENAI_API_KEY") or PLACEHOLDER_API_KEY
        self.timeout = timeout

        self._client = OpenAI(api_key=self.api_key, base_url=base_url, timeout=timeout)
        self._async_client = AsyncOpenAI(api_key=self.api_key, base_url=base_url, timeout=timeout)

    def is_available(self) -> bool:
        """Check if the API answers a model listing."""
        try:
            self._client.models.list()
            return True
        except Exception as e:
            logger.info("OpenAI endpoint %s not available: %s", self.base_url, e)
            return False

    async def agenerate(
        self,
        prompt: str,
        system_prompt: str | None = None,
        config: GenerationConfig | None = None,
    ) -> GenerationResult:
        """Async generate a response from a prompt.

        Args:
            prompt: The user prompt
            system_prompt: Optional system prompt
            config: Generation configuration

        Returns:
            GenerationResult with the response
        """
        config = config or GenerationConfig()

        response = await self._async_client.chat.completions.create(
            model=self.model,
            messages=_build_messages(prompt, system_prompt),
            temperature=config.temperature,
            max_tokens=config.max_tokens,
            top_p=config.top_p,
        )

        return GenerationResult(
            content=response.choices[0].message.content or "",
            model=response.model,
            prompt_eval_count=response.usage.prompt_tokens if response.usage else None,
            eval_count=response.usage.completion_tokens if response.usage else None,
        )


def create_llm_client(config: LLMConfig) -> OllamaClient | OpenAIClient:
    """Build the client for the configured provider."""
    if config.provider == "ollama":
        return OllamaClient(model=config.model, base_url=config.base_url, timeout=config.timeout)
    return OpenAIClient(
        model=config.model,
        base_url=config.base_url,
        api_key=config.api_key,
        timeout=config.timeout,
    )
