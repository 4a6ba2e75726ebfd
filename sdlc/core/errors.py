"""Error payloads and exit codes.

Every fallible operation reports an ``SdlcError``. The ``kind`` field follows
the error taxonomy of the tool (where the failure originated), and maps to a
stable process exit code through ``exit_code_for``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Literal

__all__ = ["ErrorCode", "ErrorKind", "SdlcError", "exit_code_for"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    These values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (bad argument, invalid config, missing version source)
    - 2: Environment error (not a git repository, gh missing)
    - 3: Workflow violation (wrong branch, dirty tree, missing PR or bump)
    - 4: Network error (gh or git remote call failed)
    - 5: I/O error (file could not be read or written)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    WORKFLOW_ERROR = 3
    NETWORK_ERROR = 4
    IO_ERROR = 5


ErrorKind = Literal[
    "validation",
    "config",
    "workflow",
    "version",
    "tracker",
    "file",
    "external_tool",
]


@dataclass(frozen=True, slots=True)
class SdlcError:
    """Canonical error payload.

    Attributes:
        kind: Where the failure originated.
        message: Human-readable description.
        hint: Remediation suggestion, if any.
        command: Exact follow-up command the user should run, if any.
    """

    kind: ErrorKind
    message: str
    hint: str | None = None
    command: str | None = None

    def pretty(self) -> str:
        lines = [self.message]
        if self.hint:
            lines.append(f"   {self.hint}")
        if self.command:
            lines.append(f"   Run: {self.command}")
        return "\n".join(lines)


_KIND_CODES: dict[str, ErrorCode] = {
    "validation": ErrorCode.USER_ERROR,
    "config": ErrorCode.USER_ERROR,
    "version": ErrorCode.USER_ERROR,
    "workflow": ErrorCode.WORKFLOW_ERROR,
    "tracker": ErrorCode.NETWORK_ERROR,
    "external_tool": ErrorCode.NETWORK_ERROR,
    "file": ErrorCode.IO_ERROR,
}


def exit_code_for(kind: str) -> ErrorCode:
    return _KIND_CODES.get(kind, ErrorCode.USER_ERROR)
