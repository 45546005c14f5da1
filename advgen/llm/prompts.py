"""Prompt templates for AI adventure generation."""

from string import Template


ADVENTURE_SYSTEM_PROMPT = """You are a tabletop game designer who writes short adventure seeds.

Answer with exactly four lines and nothing else:
Location: <one sentence>
Characters: <names or short descriptions, comma-separated>
Objective: <one sentence>
Challenges: <short phrases, comma-separated>

Do not use commas inside a single character or challenge."""


ADVENTURE_PROMPT_TEMPLATE = Template(
    """Generate an adventure with the following settings:
Genre: $genre
Difficulty: $difficulty
Length: $length

Provide the following details:
1. Location
2. Characters ($count, comma-separated)
3. Objective
4. Challenges ($count, comma-separated)"""
)


def build_adventure_prompt(labels: dict[str, str], count: int) -> str:
    """Build the user prompt for one adventure.

    Args:
        labels: Plain setting labels with "genre", "difficulty" and "length"
        count: How many characters and challenges to ask for

    Returns:
        The formatted prompt
    """
    return ADVENTURE_PROMPT_TEMPLATE.substitute(
        genre=labels["genre"],
        difficulty=labels["difficulty"],
        length=labels["length"],
        count=count,
    )
