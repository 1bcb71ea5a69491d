from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class TaskDefinition:
    key: str
    description: str
    command: str
    env: dict[str, str] = field(default_factory=dict)
    working_dir: str | None = None


@dataclass(frozen=True)
class TaskGroup:
    key: str
    description: str
    prompt: str
    tasks: tuple[TaskDefinition, ...]


MenuEntry = TaskDefinition | TaskGroup


class RegistryError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class Registry:
    def __init__(self, prompt: str, entries: list[MenuEntry] | tuple[MenuEntry, ...]):
        self.prompt = prompt
        self.entries: tuple[MenuEntry, ...] = tuple(entries)
        self._by_key: dict[str, MenuEntry] = {}

        if len(self.entries) < 1:
            raise RegistryError("There must be at least one task in the registry")

        for entry in self.flattened():
            self._check_entry(entry)
            if entry.key in self._by_key:
                raise RegistryError(f"Duplicate task key: {entry.key}")
            self._by_key[entry.key] = entry

    def __iter__(self) -> Iterator[MenuEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def flattened(self) -> list[MenuEntry]:
        # Only one level of nesting exists, so that is all we flatten.
        out: list[MenuEntry] = list(self.entries)
        for entry in self.entries:
            if isinstance(entry, TaskGroup):
                out.extend(entry.tasks)
        return out

    def keys(self) -> list[str]:
        return list(self._by_key)

    def has(self, key: str) -> bool:
        return key in self._by_key

    def get(self, key: str) -> MenuEntry:
        if not self.has(key):
            raise KeyError(key)

        return self._by_key[key]

    @staticmethod
    def _check_entry(entry: MenuEntry) -> None:
        if len(entry.key.strip()) < 1:
            raise RegistryError("A task key can't be empty")

        if isinstance(entry, TaskGroup):
            if len(entry.tasks) < 1:
                raise RegistryError(f"{entry.key}: A group needs at least one task")
            for child in entry.tasks:
                if not isinstance(child, TaskDefinition):
                    raise RegistryError(f"{entry.key}: Groups can only hold plain tasks")
        elif len(entry.command.strip()) < 1:
            raise RegistryError(f"{entry.key}: Command missing")
