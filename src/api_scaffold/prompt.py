"""Interactive prompt capability used by the configuration collector.

The collector only talks to the ``Prompter`` protocol, so tests can drive it
with scripted answers instead of a terminal.
"""

from typing import Protocol

import click

from api_scaffold.errors import PromptError


class Prompter(Protocol):
    """Asks the user questions and returns raw answers."""

    def choose(self, message: str, items: list[str]) -> list[str]:
        """Multi-select from *items*. May return an empty list."""
        ...

    def text(self, message: str, default: str | None = None) -> str:
        """Free-text answer, *default* when the user just presses ENTER."""
        ...


class ClickPrompter:
    """Terminal prompts built on ``click.prompt``.

    Multi-select is rendered as a numbered list; the user answers with a
    comma-separated list of numbers or labels, or ENTER for no selection.
    """

    def choose(self, message: str, items: list[str]) -> list[str]:
        click.echo(message)
        for index, item in enumerate(items, start=1):
            click.echo(f"  {index}) {item}")
        try:
            return click.prompt(
                "Select (comma-separated, ENTER for none)",
                default="",
                show_default=False,
                value_proc=lambda raw: _parse_selection(raw, items),
            )
        except click.Abort as e:
            raise PromptError("Input aborted while waiting for a selection.") from e

    def text(self, message: str, default: str | None = None) -> str:
        try:
            return click.prompt(message, default=default, type=str)
        except click.Abort as e:
            raise PromptError("Input aborted while waiting for an answer.") from e


def _parse_selection(raw: str, items: list[str]) -> list[str]:
    """Turn ``"1, POST"`` into ``["GET", "POST"]``, keeping item order."""
    picked: set[str] = set()
    for token in raw.replace(",", " ").split():
        if token.isdigit() and 1 <= int(token) <= len(items):
            picked.add(items[int(token) - 1])
            continue
        matches = [item for item in items if item.lower() == token.lower()]
        if not matches:
            raise click.BadParameter(f"{token!r} is not one of {', '.join(items)}")
        picked.add(matches[0])
    return [item for item in items if item in picked]
