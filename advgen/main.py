"""Main entry point for the Random Adventure Generator."""

import argparse
import logging
import random
import sys
from pathlib import Path

from .campaign.generator import AdventureGenerator, AIAdventureGenerator, RandomAdventureGenerator
from .config import AppConfig, LoggingConfig, get_config, reload_config
from .game.storage import AdventureStore
from .llm.client import GenerationConfig, create_llm_client

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Random Adventure Generator")
    parser.add_argument("--config", type=Path, default=None,
                        help="YAML config file (default: ./config.yaml)")
    parser.add_argument("--mode", choices=["auto", "random", "ai"], default=None,
                        help="Generate with random tables, the AI service, or whichever is available")
    parser.add_argument("--save-file", type=Path, default=None,
                        help="Where to save and load the adventure")
    return parser.parse_args(argv)


def setup_logging(config: LoggingConfig, log_file: Path) -> None:
    """Send logs to a file; the terminal belongs to the UI."""
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=log_file,
        level=config.level.upper(),
        format=config.format,
    )


def build_generator(config: AppConfig | None = None) -> AdventureGenerator:
    """Pick the adventure generator for the configured mode.

    In ``auto`` mode the AI generator is used only if the LLM endpoint
    answers; otherwise adventures come from the random tables. Without
    an explicit config the process-wide one is used.
    """
    config = config or get_config()
    rng = random.Random(config.generator.seed)
    random_generator = RandomAdventureGenerator(rng)
    mode = config.generator.mode
    if mode == "random":
        return random_generator

    client = create_llm_client(config.llm)
    if mode == "auto" and not client.is_available():
        logger.info("AI service not available at %s, using random tables", config.llm.base_url)
        return random_generator

    logger.info("Using AI generation with %s (%s)", config.llm.model, config.llm.provider)
    return AIAdventureGenerator(
        client,
        config=GenerationConfig(
            temperature=config.llm.temperature,
            max_tokens=config.llm.max_tokens,
        ),
        fallback=random_generator if config.generator.fallback_to_random else None,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the application.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    args = parse_args(argv)
    try:
        config = reload_config(args.config)
        if args.mode:
            config.generator.mode = args.mode
        if args.save_file:
            config.paths.save_file = args.save_file

        setup_logging(config.logging, config.paths.log_file)
        generator = build_generator(config)
        store = AdventureStore(config.paths.save_file)

        from .ui.app import run_app

        return run_app(generator, store, ui_config=config.ui)

    except KeyboardInterrupt:
        print("\nGoodbye, adventurer!")
        return 0
    except Exception as e:
        logger.exception("Fatal error")
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
