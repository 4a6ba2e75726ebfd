"""Platform abstraction layer: processes and files."""

from .files import atomic_write_text, read_optional_text, write_text
from .process import ProcessError, run

__all__ = [
    "ProcessError",
    "atomic_write_text",
    "read_optional_text",
    "run",
    "write_text",
]
