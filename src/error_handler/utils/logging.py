from pathlib import Path
from importlib import metadata as importlib_metadata
from typing import Any
import tomllib

DISTRIBUTION_NAME = "error-handler"

# --------------------
# pyproject lookup (source checkouts)
# --------------------


def find_pyproject(start: Path, max_up: int = 5) -> Path | None:
    p = start
    for _ in range(max_up):
        candidate = p / "pyproject.toml"
        if candidate.exists():
            return candidate
        if p.parent == p:
            break
        p = p.parent
    return None


def get_pyproject_value(key: str, start: Path | None = None, max_up: int = 5, default: Any = None) -> Any:
    """
    Return the value for dot-separated `key` (e.g. "project.version") from the nearest
    pyproject.toml above `start`, or `default` when the file or key is missing.
    """
    pyproject = find_pyproject(start or Path(__file__).resolve().parent, max_up=max_up)
    if pyproject is None:
        return default

    try:
        with pyproject.open("rb") as f:
            cur = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return default

    for part in key.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur


# --------------------
# Project metadata
# --------------------


def get_project_version(default: str = "unknown") -> str:
    """
    Installed distribution version first (containers, wheels), then pyproject.toml
    for source checkouts, then `default`.
    """
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        pass
    return get_pyproject_value("project.version", default=default)


__all__ = [
    "find_pyproject",
    "get_pyproject_value",
    "get_project_version",
]
