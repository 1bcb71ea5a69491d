from __future__ import annotations

import logging

from .registry import Registry, TaskDefinition, TaskGroup
from .selector import Chooser, questionary_chooser, select_task

logger = logging.getLogger(__name__)


def resolve(
    registry: Registry, key: str | None, chooser: Chooser = questionary_chooser
) -> TaskDefinition:
    if key is not None:
        if registry.has(key):
            entry = registry.get(key)
            if isinstance(entry, TaskGroup):
                return select_task(entry.tasks, entry.prompt, chooser)
            return entry
        logger.warning("Unknown task '%s', falling back to the menu", key)

    return select_task(registry.entries, registry.prompt, chooser)
