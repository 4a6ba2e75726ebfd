"""Project configuration (``.sdlc.json``).

The config file is optional. When present it is a JSON object with the
recognized keys ``language``, ``tracker``, ``repo`` and ``view``; unknown
keys are carried through untouched. Values not set in the file fall back to
``DEFAULT_LANGUAGE`` / ``DEFAULT_TRACKER``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from sdlc.platform.files import read_optional_text, write_text

from .errors import SdlcError
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str
from .validation import validate_one_of, validate_repo_format

__all__ = [
    "CONFIG_FILE_NAME",
    "CONFIG_KEYS",
    "DEFAULT_LANGUAGE",
    "DEFAULT_TRACKER",
    "SdlcConfig",
    "get_config",
    "load_config",
    "set_config_value",
    "unset_config_value",
    "validate_config",
]

CONFIG_FILE_NAME = ".sdlc.json"
CONFIG_KEYS = ("language", "tracker", "repo", "view")
VIEW_MODES = ("list", "table")

DEFAULT_LANGUAGE = "nodejs"
DEFAULT_TRACKER = "github"

ViewMode = Literal["list", "table"]


@dataclass(frozen=True, slots=True)
class SdlcConfig:
    """Effective configuration (file values merged over defaults)."""

    language: str = DEFAULT_LANGUAGE
    tracker: str = DEFAULT_TRACKER
    repo: str | None = None
    view: ViewMode | None = None
    extra: StrDict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> SdlcConfig:
        view = get_str(data, "view")
        return cls(
            language=get_str(data, "language") or DEFAULT_LANGUAGE,
            tracker=get_str(data, "tracker") or DEFAULT_TRACKER,
            repo=get_str(data, "repo"),
            view="table" if view == "table" else "list" if view == "list" else None,
            extra={k: v for k, v in data.items() if k not in CONFIG_KEYS},
        )


def config_path(root: Path) -> Path:
    return root / CONFIG_FILE_NAME


def _config_error(message: str, *, hint: str | None = None) -> Err[SdlcError]:
    return Err(
        SdlcError(
            kind="config",
            message=message,
            hint=hint,
            command="sdlc config list",
        )
    )


def validate_config(data: object) -> Result[StrDict, SdlcError]:
    """Check the shape of a parsed config object."""
    table = as_str_dict(data)
    if table is None:
        return _config_error("Config must be an object", hint=CONFIG_FILE_NAME)

    for key in ("language", "tracker", "repo"):
        value = table.get(key)
        if value is not None and not isinstance(value, str):
            return _config_error(f'Config field "{key}" must be a string')

    view = table.get("view")
    if view is not None and view not in VIEW_MODES:
        return _config_error('Config field "view" must be "list" or "table"')

    return Ok(table)


def load_config(root: Path) -> Result[StrDict | None, SdlcError]:
    """Load the raw config object.

    Returns Ok(None) when ``.sdlc.json`` does not exist.
    """
    path = config_path(root)
    text = read_optional_text(path)
    if isinstance(text, Err):
        return text
    if text.value is None:
        return Ok(None)

    try:
        obj: object = json.loads(text.value)
    except json.JSONDecodeError as e:
        return _config_error(f"Invalid JSON in {CONFIG_FILE_NAME}: {e}", hint=str(path))

    return validate_config(obj)


def get_config(root: Path) -> Result[SdlcConfig, SdlcError]:
    """Load the config merged over defaults. A missing file is not an error."""
    loaded = load_config(root)
    if isinstance(loaded, Err):
        return loaded
    if loaded.value is None:
        return Ok(SdlcConfig())
    return Ok(SdlcConfig.from_dict(loaded.value))


def set_config_value(root: Path, key: str, value: str | None) -> Result[Path | None, SdlcError]:
    """Set (or, with ``value=None``, remove) one config key.

    Removing the last remaining key deletes the file. Returns the written
    path, or None when the file was deleted.
    """
    if key not in CONFIG_KEYS:
        return Err(
            SdlcError(
                kind="validation",
                message=f"Unknown config key: {key}",
                hint=f"Valid keys: {', '.join(CONFIG_KEYS)}",
            )
        )

    loaded = load_config(root)
    if isinstance(loaded, Err):
        return loaded
    data: StrDict = dict(loaded.value or {})

    if value is None:
        data.pop(key, None)
    else:
        if key == "repo":
            checked_value = validate_repo_format(value)
        elif key == "view":
            checked_value = validate_one_of(value, "view", VIEW_MODES)
        else:
            checked_value = Ok(value)
        if isinstance(checked_value, Err):
            return checked_value
        data[key] = checked_value.value
        checked = validate_config(data)
        if isinstance(checked, Err):
            return checked

    path = config_path(root)
    if not data:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            return Err(
                SdlcError(kind="file", message=f"failed to delete {path.name}: {e}", hint=str(path))
            )
        return Ok(None)

    written = write_text(path, json.dumps(data, indent=2) + "\n")
    if isinstance(written, Err):
        return written
    return Ok(path)


def unset_config_value(root: Path, key: str) -> Result[Path | None, SdlcError]:
    return set_config_value(root, key, None)
