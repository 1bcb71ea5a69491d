from .executor import REPORT_HEADER, BatchExecutor, print_report, split_command_line
from .types import BatchResult, ExecutorError, SpawnError, SubCommandResult

__all__ = [
    "BatchExecutor",
    "BatchResult",
    "ExecutorError",
    "print_report",
    "REPORT_HEADER",
    "SpawnError",
    "split_command_line",
    "SubCommandResult",
]
