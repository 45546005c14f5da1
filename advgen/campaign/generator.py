"""Adventure generation, from random tables or an LLM."""

import logging
import random
import re
from typing import Protocol

from ..game.adventure import Adventure
from ..game.settings import AdventureSettings
from ..llm.client import GenerationConfig, LLMClient
from ..llm.prompts import ADVENTURE_SYSTEM_PROMPT, build_adventure_prompt
from .tables import CHALLENGE_QUALIFIERS, CHALLENGES, CHARACTERS, LOCATIONS, OBJECTIVES

logger = logging.getLogger(__name__)

UNKNOWN = "Unknown"

RESPONSE_FIELDS = ("location", "characters", "objective", "challenges")
LIST_FIELDS = ("characters", "challenges")

# "Location: ...", "2. Characters: ...", "**Objective:** ..." and similar
_LABEL_RE = re.compile(
    r"^(?:\d+[.)]\s*)?[*_#\s]*(location|characters|objective|challenges)[*_\s]*:[*_\s]*(.*)$",
    re.IGNORECASE,
)


class GenerationFailure(Exception):
    """Raised when an adventure cannot be produced for the current request."""


class AdventureGenerator(Protocol):
    """Anything that can turn settings into an adventure."""

    async def generate(self, settings: AdventureSettings) -> Adventure: ...


class RandomAdventureGenerator:
    """Composes adventures from the built-in random tables."""

    def __init__(self, rng: random.Random | None = None):
        """Initialize the generator.

        Args:
            rng: Random source; pass a seeded instance for repeatable output
        """
        self.rng = rng or random.Random()

    def compose(self, settings: AdventureSettings) -> Adventure:
        """Build an adventure synchronously."""
        count = settings.count
        qualifiers = CHALLENGE_QUALIFIERS[settings.difficulty]
        challenges = [
            f"{challenge} ({self.rng.choice(qualifiers)})"
            for challenge in self.rng.sample(CHALLENGES[settings.genre], count)
        ]
        return Adventure(
            location=self.rng.choice(LOCATIONS[settings.genre]),
            characters=tuple(self.rng.sample(CHARACTERS[settings.genre], count)),
            objective=self.rng.choice(OBJECTIVES[settings.genre]),
            challenges=tuple(challenges),
        )

    async def generate(self, settings: AdventureSettings) -> Adventure:
        return self.compose(settings)


class AIAdventureGenerator:
    """Generates adventures by asking an LLM for four labelled lines."""

    def __init__(
        self,
        llm_client: LLMClient,
        config: GenerationConfig | None = None,
        fallback: AdventureGenerator | None = None,
    ):
        """Initialize the AI generator.

        Args:
            llm_client: Client used for the remote call
            config: Generation configuration
            fallback: Generator used instead when the remote call fails
        """
        self.llm = llm_client
        self.config = config or GenerationConfig()
        self.fallback = fallback

    async def generate(self, settings: AdventureSettings) -> Adventure:
        """Generate an adventure for the given settings.

        Raises:
            GenerationFailure: If the call fails or the response is empty
                and no fallback is configured
        """
        try:
            return await self._generate(settings)
        except GenerationFailure as e:
            if self.fallback is None:
                raise
            logger.warning("AI generation failed, using fallback generator: %s", e)
            return await self.fallback.generate(settings)

    async def _generate(self, settings: AdventureSettings) -> Adventure:
        count = settings.count
        prompt = build_adventure_prompt(settings.as_labels(), count)
        logger.info("Requesting adventure from %s: %s", self.llm.model, settings.as_labels())

        try:
            result = await self.llm.agenerate(
                prompt,
                system_prompt=ADVENTURE_SYSTEM_PROMPT,
                config=self.config,
            )
        except Exception as e:
            raise GenerationFailure(f"Adventure service request failed: {e}") from e

        return parse_adventure_response(result.content, count)


def parse_adventure_response(text: str, count: int) -> Adventure:
    """Parse a four-line LLM response into an adventure.

    Fields are found by their label; a line without a label is used for the
    field at its position. Missing fields become "Unknown". List fields are
    cut or padded with "Unknown" to exactly ``count`` entries.

    Args:
        text: Raw response content
        count: Required number of characters and challenges

    Returns:
        The parsed Adventure

    Raises:
        GenerationFailure: If the response is empty
    """
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise GenerationFailure("Adventure service returned an empty response.")

    values: dict[str, str] = {}
    unlabelled: dict[int, str] = {}
    for index, line in enumerate(lines):
        match = _LABEL_RE.match(line)
        if match:
            values.setdefault(match.group(1).lower(), match.group(2).strip(" *_"))
        else:
            unlabelled[index] = line

    for index, name in enumerate(RESPONSE_FIELDS):
        if name not in values and index in unlabelled:
            values[name] = unlabelled[index]

    missing = [name for name in RESPONSE_FIELDS if not values.get(name)]
    if missing:
        logger.warning("Adventure response missing %s; using %r", ", ".join(missing), UNKNOWN)

    return Adventure(
        location=values.get("location") or UNKNOWN,
        characters=_split_entries(values.get("characters", ""), count),
        objective=values.get("objective") or UNKNOWN,
        challenges=_split_entries(values.get("challenges", ""), count),
    )


def _split_entries(value: str, count: int) -> tuple[str, ...]:
    entries = [entry.strip() for entry in value.split(",") if entry.strip()][:count]
    entries.extend([UNKNOWN] * (count - len(entries)))
    return tuple(entries)
