"""Config utility for dbg settings (root source directory, etc.).

Settings are resolved from an explicit value, a ``DBG_*`` environment variable,
``~/.config/dbg/config.toml`` (or ``$XDG_CONFIG_HOME/dbg/config.toml``), then a
built-in default. Uses tomli/tomli-w for TOML parsing and writing.
"""

import contextlib
import os
from pathlib import Path
from typing import Any, TypeVar, cast

import tomli
import tomli_w

from dbg.utils import debug as _debug

# Determine config directory respecting XDG_CONFIG_HOME if set.
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
# Path like ~/.config/dbg or $XDG_CONFIG_HOME/dbg
CONFIG_DIR = _xdg_config_home / "dbg"
CONFIG_FILE = CONFIG_DIR / "config.toml"

ROOT_KEY = "root"


def _fallback_root() -> str:
    """Location used when no root is configured anywhere: the home directory."""
    return str(Path.home())


def get_default_root() -> str:
    """Read the persisted root source directory from config.toml.

    Returns:
        str: The configured root, or the home directory if not set.
    """
    value = _read_config_file().get(ROOT_KEY)
    if isinstance(value, str) and value:
        return value
    return _fallback_root()


def set_default_root(path: str | Path) -> None:
    """Persist the root source directory in config.toml.

    Args:
        path: Directory that source file paths are shown relative to when the
            caller lives outside the working directory.
    """
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    data = _read_config_file()
    data[ROOT_KEY] = str(path)
    with CONFIG_FILE.open("wb") as f:
        tomli_w.dump(data, f)


def resolve_root(explicit: str | Path | None = None) -> str:
    """Resolve the root source directory.

    Precedence is explicit value > ``DBG_ROOT`` > config file > home directory.
    An empty ``DBG_ROOT`` or config value counts as unset.
    """
    cli_value = str(explicit) if explicit is not None and str(explicit) else None
    value = resolve_setting(ROOT_KEY, default="", cli_value=cli_value)
    if isinstance(value, str) and value:
        return value
    return get_default_root()


# ---------------------------------------------------------------------------
# Generic configuration resolution
# ---------------------------------------------------------------------------

T = TypeVar("T")


def _read_config_file() -> dict[str, Any]:
    """Read the TOML config file if it exists, returning a (nested) dict."""

    if not CONFIG_FILE.exists():
        return {}
    try:
        with CONFIG_FILE.open("rb") as f:
            return tomli.load(f)
    except (OSError, tomli.TOMLDecodeError) as exc:
        _debug.warn(f"ignoring unreadable config {CONFIG_FILE}: {exc}")
        return {}


def _lookup_nested(data: dict[str, Any], dotted_key: str) -> Any | None:
    """Retrieve a nested value from *data* given a dotted key path.

    Example: dotted_key="paths.root" will attempt ``data["paths"]["root"]``
    returning None if any level is missing.
    """

    keys = dotted_key.split(".")
    current: Any = data
    for part in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(part)
        if current is None:
            return None
    return current


def _make_env_var_name(dotted_key: str, prefix: str = "DBG_") -> str:
    """Convert a dotted key path to an uppercase ENV var name.

    Example: "paths.root" -> "DBG_PATHS_ROOT".
    """

    return prefix + dotted_key.replace(".", "_").upper()


def _coerce(raw: Any, default: T) -> T:
    """Best-effort coercion of *raw* to the type of *default*."""
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return cast(T, raw)
        if isinstance(raw, str):
            return cast(T, raw.lower() in {"1", "true", "yes", "on"})
        return default
    if isinstance(default, int):
        if isinstance(raw, int):
            return cast(T, raw)
        if isinstance(raw, str):
            with contextlib.suppress(ValueError):
                return cast(T, int(raw))
        return default
    if isinstance(default, float):
        if isinstance(raw, (int, float)):
            return cast(T, float(raw))
        if isinstance(raw, str):
            with contextlib.suppress(ValueError):
                return cast(T, float(raw))
        return default
    if default is None and isinstance(raw, str):
        if raw.isdigit():
            return cast(T, int(raw))
        with contextlib.suppress(ValueError):
            return cast(T, float(raw))
    return cast(T, raw)


def resolve_setting(
    key: str,
    *,
    default: T,
    cli_value: T | None = None,
) -> T:
    """Resolve a configuration *key* using precedence explicit > env > config > default.

    Args:
        key: Dotted key path, e.g. ``"paths.root"`` or ``"root"``.
        default: Value to fall back to when no overrides found.
        cli_value: Explicitly supplied value (``None`` when not provided).

    Returns:
        The resolved value with type matching *default* (or *cli_value*).
    """

    if cli_value is not None:
        return cli_value

    env_var = _make_env_var_name(key)
    if env_var in os.environ:
        return _coerce(os.environ[env_var], default)

    file_val = _lookup_nested(_read_config_file(), key)
    if file_val is not None:
        return _coerce(file_val, default)

    return default
