from __future__ import annotations

import argparse

from asdev.config import DEFAULT_BUILD_CONFIG
from asdev.registry import Registry, TaskGroup

PROG = "asdev"
DESCRIPTION = "Helps you navigate the Application Services repository"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser(registry: Registry | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        epilog=_tasks_epilog(registry) if registry is not None else None,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=registry is not None,
    )

    parser.add_argument(
        "--config",
        default=None,
        help="Path to a task menu file (.yml/.yaml, .toml, .json); built-in menu if omitted",
    )
    parser.add_argument(
        "--build-config",
        default=DEFAULT_BUILD_CONFIG,
        help="Build config read for the next release versions",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level",
    )

    # Free-form rather than choices: an unknown task opens the menu.
    parser.add_argument(
        "task",
        nargs="?",
        default=None,
        help="Task to run directly; omit it to pick from the menu",
    )

    return parser


def _tasks_epilog(registry: Registry) -> str:
    entries = registry.flattened()
    width = max(len(entry.key) for entry in entries)
    lines = ["tasks:"]
    for entry in entries:
        suffix = " (menu)" if isinstance(entry, TaskGroup) else ""
        lines.append(f"  {entry.key.ljust(width)}  {entry.description}{suffix}")
    return "\n".join(lines)
