from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

# Child process used by the executor tests. Commands are split on whitespace,
# so behaviour is driven by plain words: exit N, sleep S, touch P, append P W,
# wait P (exit 9 if P never shows up), env NAME P (write $NAME to P), killself.
HELPER = """\
import os
import signal
import sys
import time
from pathlib import Path

args = sys.argv[1:]
while args:
    op = args.pop(0)
    if op == "exit":
        sys.exit(int(args.pop(0)))
    elif op == "sleep":
        time.sleep(float(args.pop(0)))
    elif op == "touch":
        Path(args.pop(0)).touch()
    elif op == "append":
        path = args.pop(0)
        with open(path, "a", encoding="utf-8") as fh:
            fh.write(args.pop(0) + "\\n")
    elif op == "wait":
        target = Path(args.pop(0))
        deadline = time.monotonic() + 10
        while not target.exists():
            if time.monotonic() > deadline:
                sys.exit(9)
            time.sleep(0.02)
    elif op == "env":
        name = args.pop(0)
        Path(args.pop(0)).write_text(os.environ.get(name, "<unset>"), encoding="utf-8")
    elif op == "killself":
        os.kill(os.getpid(), signal.SIGTERM)
        time.sleep(5)
    else:
        sys.exit(f"unknown op {op}")
"""


@pytest.fixture
def helper(tmp_path: Path) -> Callable[..., str]:
    """Build a sub-command string running the helper script with the given ops."""
    script = tmp_path / "helper.py"
    script.write_text(HELPER, encoding="utf-8")

    def build(*ops: object) -> str:
        return " ".join([sys.executable, str(script), *map(str, ops)])

    return build
