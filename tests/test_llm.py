"""Tests for the LLM client wrappers."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from advgen.config import LLMConfig
from advgen.llm.client import (
    PLACEHOLDER_API_KEY,
    GenerationConfig,
    GenerationResult,
    OllamaClient,
    OpenAIClient,
    create_llm_client,
)


class TestGenerationConfig:
    """Test GenerationConfig dataclass."""

    def test_default_values(self):
        config = GenerationConfig()
        assert config.temperature == 0.7
        assert config.max_tokens == 512
        assert config.top_p == 0.9


class TestOllamaClient:
    """Test OllamaClient wrapper."""

    def test_init(self):
        client = OllamaClient(model="hermes3:latest", base_url="http://localhost:11434")
        assert client.model == "hermes3:latest"
        assert client.base_url == "http://localhost:11434"

    @patch("advgen.llm.client.Client")
    def test_is_available(self, mock_client_class):
        mock_client = MagicMock()
        mock_client.list.return_value = {"models": [{"name": "hermes3:latest"}, {"name": "llama2:7b"}]}
        mock_client_class.return_value = mock_client

        assert OllamaClient(model="hermes3:latest").is_available() is True

    @patch("advgen.llm.client.Client")
    def test_is_not_available(self, mock_client_class):
        mock_client = MagicMock()
        mock_client.list.return_value = {"models": [{"name": "llama2:7b"}]}
        mock_client_class.return_value = mock_client

        assert OllamaClient(model="hermes3:latest").is_available() is False

    @patch("advgen.llm.client.Client")
    def test_server_down(self, mock_client_class):
        mock_client = MagicMock()
        mock_client.list.side_effect = ConnectionError("refused")
        mock_client_class.return_value = mock_client

        assert OllamaClient().is_available() is False

    @pytest.mark.asyncio
    @patch("advgen.llm.client.AsyncClient")
    async def test_agenerate(self, mock_client_class):
        mock_client = MagicMock()
        mock_client.chat = AsyncMock(return_value={
            "message": {"content": "Location: Somewhere"},
            "model": "hermes3:latest",
            "eval_count": 12,
        })
        mock_client_class.return_value = mock_client

        client = OllamaClient()
        result = await client.agenerate("prompt", system_prompt="system")

        assert isinstance(result, GenerationResult)
        assert result.content == "Location: Somewhere"
        assert result.eval_count == 12
        messages = mock_client.chat.call_args.kwargs["messages"]
        assert messages == [
            {"role": "system", "content": "system"},
            {"role": "user", "content": "prompt"},
        ]


class TestOpenAIClient:
    """Test OpenAIClient wrapper."""

    def test_placeholder_key_for_local_servers(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        client = OpenAIClient(base_url="http://localhost:8080/v1")
        assert client.api_key == PLACEHOLDER_API_KEY

    def test_env_key(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-from-env")
        assert OpenAIClient().api_key == "sk-from-env"

    @patch("advgen.llm.client.OpenAI")
    def test_is_available(self, mock_openai_class):
        mock_openai_class.return_value = MagicMock()
        assert OpenAIClient(api_key="k").is_available() is True

    @patch("advgen.llm.client.OpenAI")
    def test_is_not_available(self, mock_openai_class):
        mock_client = MagicMock()
        mock_client.models.list.side_effect = ConnectionError("refused")
        mock_openai_class.return_value = mock_client
        assert OpenAIClient(api_key="k").is_available() is False

    @pytest.mark.asyncio
    @patch("advgen.llm.client.AsyncOpenAI")
    async def test_agenerate(self, mock_openai_class):
        response = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content="Location: Mars"))],
            model="gpt-4",
            usage=SimpleNamespace(prompt_tokens=40, completion_tokens=20),
        )
        mock_client = MagicMock()
        mock_client.chat.completions.create = AsyncMock(return_value=response)
        mock_openai_class.return_value = mock_client

        client = OpenAIClient(api_key="k", base_url="http://localhost:8080/v1")
        result = await client.agenerate("prompt", config=GenerationConfig(temperature=0.2))

        assert result.content == "Location: Mars"
        assert result.prompt_eval_count == 40
        assert result.eval_count == 20
        kwargs = mock_client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4"
        assert kwargs["temperature"] == 0.2
        assert kwargs["messages"] == [{"role": "user", "content": "prompt"}]


class TestCreateLLMClient:
    """Test provider selection."""

    def test_openai_provider(self):
        client = create_llm_client(LLMConfig(api_key="k"))
        assert isinstance(client, OpenAIClient)
        assert client.base_url == "http://localhost:8080/v1"

    def test_ollama_provider(self):
        client = create_llm_client(LLMConfig(provider="ollama", model="hermes3:latest"))
        assert isinstance(client, OllamaClient)
        assert client.model == "hermes3:latest"
