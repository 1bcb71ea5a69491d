from __future__ import annotations

import logging
from typing import Callable, Sequence

import questionary

from .registry import MenuEntry, TaskDefinition, TaskGroup

logger = logging.getLogger(__name__)

Chooser = Callable[[str, Sequence[str]], int]


class SelectionError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


def questionary_chooser(prompt: str, labels: Sequence[str]) -> int:
    choices = [questionary.Choice(title=label, value=i) for i, label in enumerate(labels)]
    answer = questionary.select(
        prompt,
        choices=choices,
        default=choices[0],
        use_indicator=True,
    ).ask()

    # questionary returns None when the prompt is interrupted.
    if answer is None:
        raise SelectionError("Selection cancelled")
    return answer


def select_task(
    entries: Sequence[MenuEntry], prompt: str, chooser: Chooser = questionary_chooser
) -> TaskDefinition:
    entry = _choose(entries, prompt, chooser)
    if isinstance(entry, TaskGroup):
        logger.debug("Opening group %s", entry.key)
        entry = _choose(entry.tasks, entry.prompt, chooser)
    if not isinstance(entry, TaskDefinition):
        raise SelectionError(f"{entry.key}: menus only go one level deep")
    return entry


def _choose(entries: Sequence[MenuEntry], prompt: str, chooser: Chooser) -> MenuEntry:
    if len(entries) < 1:
        raise SelectionError(f"Nothing to choose from for {prompt!r}")

    index = chooser(prompt, [entry.description for entry in entries])
    if not 0 <= index < len(entries):
        raise SelectionError(f"Selection out of range: {index}")
    return entries[index]
