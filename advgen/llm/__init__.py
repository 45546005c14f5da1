"""LLM integration module for remote adventure generation."""

from .client import OllamaClient, OpenAIClient, create_llm_client

__all__ = ["OllamaClient", "OpenAIClient", "create_llm_client"]
