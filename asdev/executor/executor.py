from __future__ import annotations

import logging
import os
import subprocess
import sys
from typing import TextIO

from .types import BatchResult, ExecutorError, SpawnError, SubCommandResult

logger = logging.getLogger(__name__)

REPORT_HEADER = "==========  Report  =========="


def split_command_line(command: str) -> list[str]:
    parts = [part.strip() for part in command.split(";")]
    commands = [part for part in parts if part]

    if len(commands) < 1:
        raise ExecutorError(f"No command to run in {command!r}")

    return commands


class BatchExecutor:
    """Runs the ``;``-separated sub-commands of a task side by side.

    Every sub-command is started before any is waited on, and the children
    write straight to the inherited stdout/stderr. Results always come back
    in the order the sub-commands were written, whatever order they finish in.
    """

    def __init__(self, *, cwd: str | None = None, env: dict[str, str] | None = None):
        self.cwd = cwd
        self.env = env

    def execute(self, command: str) -> BatchResult:
        commands = split_command_line(command)
        env = {**os.environ, **self.env} if self.env else None

        launched: list[tuple[str, subprocess.Popen]] = []
        spawn_error: SpawnError | None = None

        for cmd in commands:
            # No shell quoting: arguments are split on whitespace only.
            argv = cmd.split()
            logger.debug("Launching %s", argv)
            try:
                proc = subprocess.Popen(argv, cwd=self.cwd or None, env=env)
            except OSError as exc:
                spawn_error = SpawnError(cmd, exc)
                break
            launched.append((cmd, proc))

        results = []
        for cmd, proc in launched:
            returncode = proc.wait()
            logger.debug("%s exited with %d", cmd, returncode)
            results.append(SubCommandResult(cmd, returncode))

        if spawn_error is not None:
            raise spawn_error

        return BatchResult(results)


def print_report(result: BatchResult, file: TextIO | None = None) -> None:
    out = file if file is not None else sys.stdout
    print(f"\n{REPORT_HEADER}\n", file=out)
    for r in result.results:
        if r.ok:
            print(f"OK {r.command}", file=out)
        else:
            print(f"FAIL {r.command}, exit code = {r.exit_code}", file=out)
    out.flush()
