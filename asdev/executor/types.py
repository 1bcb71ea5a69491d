from dataclasses import dataclass


@dataclass(frozen=True)
class SubCommandResult:
    command: str
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def exit_code(self) -> int:
        # Popen reports death by signal N as -N; shells report it as 128 + N.
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode


@dataclass(frozen=True)
class BatchResult:
    results: list[SubCommandResult]

    @property
    def failed(self) -> list[SubCommandResult]:
        return [r for r in self.results if not r.ok]

    @property
    def exit_code(self) -> int:
        for result in self.results:
            if not result.ok:
                return result.exit_code
        return 0


class ExecutorError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class SpawnError(ExecutorError):
    def __init__(self, command: str, cause: OSError):
        super().__init__(f"Can't start '{command}': {cause}")
        self.command = command
        self.cause = cause
