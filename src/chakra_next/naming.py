"""Component name validation and interactive prompting."""

import re

import click
from loguru import logger

COMPONENT_NAME_PATTERN = re.compile(r"[A-Z][A-Za-z]*")

PROMPT_TEXT = (
    "Please enter a valid component name "
    "(starting with an uppercase letter and containing only letters):"
)

INVALID_NAME_MESSAGE = (
    "Invalid component name. "
    "It must start with an uppercase letter and contain only letters."
)


def is_valid_component_name(name: str) -> bool:
    """Check that *name* is an uppercase ASCII letter followed by ASCII letters."""
    return COMPONENT_NAME_PATTERN.fullmatch(name) is not None


def prompt_for_component_name() -> str:
    """Read a single component name from stdin."""
    answer = click.prompt(
        PROMPT_TEXT, default="", show_default=False, prompt_suffix=" "
    )
    return answer.strip()


def resolve_component_name(candidate: str) -> str:
    """Return *candidate* once valid, re-prompting for as long as it is not."""
    name = candidate
    while not is_valid_component_name(name):
        logger.debug(f"Rejected component name: {name!r}")
        click.echo(INVALID_NAME_MESSAGE)
        name = prompt_for_component_name()
    return name
