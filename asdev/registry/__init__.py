from .types import MenuEntry, Registry, RegistryError, TaskDefinition, TaskGroup
from .default import DEFAULT_PROMPT, build_default_registry

__all__ = [
    "build_default_registry",
    "DEFAULT_PROMPT",
    "MenuEntry",
    "Registry",
    "RegistryError",
    "TaskDefinition",
    "TaskGroup",
]
