"""Result type for explicit error handling.

Release operations either produce a value or a structured error; they do not
raise for expected failures (missing version file, dirty tree, gh failure).

Usage:
    match source.current_version():
        case Ok(version):
            console.print(f"Current version: {version}")
        case Err(error):
            console.error(error.pretty())
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Err", "Ok", "Result"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result.

    Attributes:
        error: The error payload (usually an SdlcError).
    """

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
