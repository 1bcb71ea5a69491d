from __future__ import annotations

import argparse
import logging
import sys

from asdev.config import ConfigError, load_registry, release_versions_or_blank
from asdev.dispatch import resolve
from asdev.executor import BatchExecutor, ExecutorError, print_report
from asdev.logging_setup import setup_logging
from asdev.registry import Registry, RegistryError, build_default_registry
from asdev.selector import Chooser, SelectionError, questionary_chooser

from .args import build_parser

logger = logging.getLogger(__name__)


def run_cli(argv: list[str] | None = None, chooser: Chooser | None = None) -> int:
    try:
        # The task list in --help depends on --config, so options are read first.
        options, _ = build_parser().parse_known_args(argv)
        setup_logging(options.log_level)

        registry = _load_registry(options)
        args = build_parser(registry).parse_args(argv)

        return cmd_run(args, registry, chooser or questionary_chooser)

    except (ConfigError, RegistryError, ExecutorError) as exc:
        print(str(exc), file=sys.stderr)
        return 2

    except SelectionError as exc:
        print(str(exc), file=sys.stderr)
        return 130

    except KeyboardInterrupt:
        return 130


def cmd_run(args: argparse.Namespace, registry: Registry, chooser: Chooser) -> int:
    task = resolve(registry, args.task, chooser)
    logger.info("Running %s: %s", task.key, task.command)

    executor = BatchExecutor(cwd=task.working_dir, env=task.env)
    result = executor.execute(task.command)
    print_report(result)
    return result.exit_code


def _load_registry(options: argparse.Namespace) -> Registry:
    if options.config is not None:
        return load_registry(options.config)
    return build_default_registry(release_versions_or_blank(options.build_config))
