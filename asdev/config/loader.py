import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from asdev.registry.default import DEFAULT_PROMPT
from asdev.registry.types import MenuEntry, Registry, TaskDefinition, TaskGroup

from .types import ConfigError, UnsupportedConfigFormatError


def load_registry(path: str | Path) -> Registry:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    return _build_registry(raw_file)


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")
    match fmt:
        case "yaml":
            try:
                raw_file = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ConfigError(f"{path}: invalid YAML") from exc
        case "toml":
            try:
                raw_file = tomllib.loads(text)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"{path}: invalid TOML") from exc
        case "json":
            try:
                raw_file = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"{path}: invalid JSON") from exc
        case _:
            raise AssertionError("Unreachable")

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: {fmt.upper()} parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_registry(raw: Mapping[str, Any]) -> Registry:
    prompt = DEFAULT_PROMPT
    if "prompt" in raw:
        prompt = _required_str("menu", raw, "prompt")

    entries: list[MenuEntry] = []
    seen: set[str] = set()

    for key, fields in _tasks_mapping("menu", raw).items():
        task_key = _task_key(key)
        if not isinstance(fields, Mapping):
            raise ConfigError(f"{task_key} must be a mapping")

        if "tasks" in fields:
            entry: MenuEntry = _build_group(task_key, fields, seen)
        else:
            entry = _build_task(task_key, fields)

        if task_key in seen:
            raise ConfigError(f"Duplicate task key after normalization: {task_key}")
        seen.add(task_key)
        entries.append(entry)

    return Registry(prompt, entries)


def _build_group(group_key: str, fields: Mapping[str, Any], seen: set[str]) -> TaskGroup:
    keys = {"description", "prompt", "tasks"}
    for field in fields.keys():
        if field not in keys:
            raise ConfigError(f"{group_key}: Can't process: {field}")

    description = _required_str(group_key, fields, "description")
    prompt = _required_str(group_key, fields, "prompt")

    tasks: list[TaskDefinition] = []
    for key, child in _tasks_mapping(group_key, fields).items():
        task_key = _task_key(key)
        if not isinstance(child, Mapping):
            raise ConfigError(f"{group_key}.{task_key} must be a mapping")
        # Menus only go one level deep.
        if "tasks" in child:
            raise ConfigError(f"{group_key}.{task_key}: Groups can't be nested")
        if task_key in seen:
            raise ConfigError(f"Duplicate task key after normalization: {task_key}")
        seen.add(task_key)
        tasks.append(_build_task(task_key, child))

    return TaskGroup(group_key, description, prompt, tuple(tasks))


def _build_task(task_id: str, fields: Mapping[str, Any]) -> TaskDefinition:
    keys = {"command", "description", "env", "working_dir"}
    env = {}
    working_dir = None

    for field in fields.keys():
        if field not in keys:
            raise ConfigError(f"{task_id}: Can't process: {field}")

    command = _required_str(task_id, fields, "command")
    description = _required_str(task_id, fields, "description")

    if "env" in fields:
        if not isinstance(fields["env"], Mapping):
            raise ConfigError(f"{task_id}: Env should be a mapping")

        for key, item in fields["env"].items():
            if not isinstance(key, str):
                raise ConfigError(f"{task_id}: {key} should be a string")

            if len(key.strip()) < 1:
                raise ConfigError(f"{task_id}: A key can't be empty")

            if not isinstance(item, str):
                raise ConfigError(f"{task_id}: {item} should be a string")

            env[key.strip()] = item

    if "working_dir" in fields:
        working_dir = _required_str(task_id, fields, "working_dir")

    return TaskDefinition(task_id, description, command, env, working_dir)


def _tasks_mapping(owner: str, raw: Mapping[str, Any]) -> Mapping[str, Any]:
    if "tasks" not in raw:
        raise ConfigError(f"{owner}: Missing 'tasks' field")

    if not isinstance(raw["tasks"], Mapping):
        raise ConfigError(f"{owner}: 'tasks' must be a mapping, got {type(raw['tasks'])}")

    if len(raw["tasks"]) < 1:
        raise ConfigError(f"{owner}: There must be at least one task")

    return raw["tasks"]


def _task_key(key: object) -> str:
    if not isinstance(key, str):
        raise ConfigError(f"Task key must be a string, got {type(key)}")

    key_norm = key.strip()
    if len(key_norm) < 1:
        raise ConfigError("A task key can't be empty")

    return key_norm


def _required_str(owner: str, fields: Mapping[str, Any], name: str) -> str:
    if name not in fields:
        raise ConfigError(f"{owner}: missing '{name}'")

    value = fields[name]
    if not isinstance(value, str):
        raise ConfigError(f"{owner}: The {name} should be a string")

    if len(value.strip()) < 1:
        raise ConfigError(f"{owner}: Please provide a {name} or remove this field")

    return value.strip()
