"""Configuration management for the Random Adventure Generator."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field


DEFAULT_LOADING_TEXTS = [
    "Rolling for inspiration",
    "Consulting the ancient maps",
    "Bribing the tavern keeper for rumors",
    "Sharpening plot hooks",
    "Counting the goblins twice",
    "Polishing the villain's monologue",
    "Hiding traps behind innocent doors",
    "Drafting a suspicious stranger",
    "Waking the dungeon from its nap",
    "Shuffling the random tables",
    "Arguing with the narrator",
    "Looking for the missing map piece",
]


class LLMConfig(BaseModel):
    """LLM provider configuration."""

    provider: Literal["openai", "ollama"] = "openai"
    model: str = "gpt-4"
    base_url: str = "http://localhost:8080/v1"
    api_key: str | None = None
    temperature: float = 0.7
    max_tokens: int = 512
    timeout: float = 120.0


class GeneratorConfig(BaseModel):
    """Adventure generation configuration."""

    mode: Literal["auto", "random", "ai"] = "auto"
    fallback_to_random: bool = False
    seed: int | None = None


class UIConfig(BaseModel):
    """UI timing and progress display configuration."""

    poll_interval: float = 0.05
    spinner_interval: float = 0.1
    loading_text_interval: float = 5.0
    spinner_glyphs: list[str] = Field(default_factory=lambda: ["|", "/", "-", "\\"], min_length=1)
    loading_texts: list[str] = Field(default_factory=lambda: list(DEFAULT_LOADING_TEXTS))


class PathsConfig(BaseModel):
    """File paths configuration."""

    save_file: Path = Path("./saved_adventure.json")
    log_file: Path = Path("./logs/advgen.log")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class AppConfig(BaseModel):
    """Main application configuration."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(config_path: Path | str | None = None) -> AppConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config file. Defaults to ./config.yaml

    Returns:
        AppConfig instance with loaded or default values
    """
    if config_path is None:
        config_path = Path("config.yaml")
    else:
        config_path = Path(config_path)

    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return AppConfig(**data)

    return AppConfig()


def save_config(config: AppConfig, config_path: Path | str | None = None) -> None:
    """Save configuration to YAML file.

    Args:
        config: AppConfig instance to save
        config_path: Path to save to. Defaults to ./config.yaml
    """
    if config_path is None:
        config_path = Path("config.yaml")
    else:
        config_path = Path(config_path)

    data = config.model_dump()
    # Path objects are not YAML-safe
    data["paths"] = {k: str(v) for k, v in data["paths"].items()}

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Global config instance
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get the global configuration instance.

    Returns:
        The loaded AppConfig instance
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(config_path: Path | str | None = None) -> AppConfig:
    """Reload configuration from disk.

    Args:
        config_path: Path to config file

    Returns:
        Newly loaded AppConfig instance
    """
    global _config
    _config = load_config(config_path)
    return _config
