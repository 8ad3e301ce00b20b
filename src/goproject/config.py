"""Configuration loader for the project resolver.

Settings come from an optional YAML file. Its path is taken from the explicit
argument or the ``GOPROJECT_CONFIG`` environment variable; when the file does
not name a workspace root, the first ``$GOPATH`` entry is used. The resolver
itself never reads the environment: settings are loaded once and injected.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .models.tool import DEFAULT_LOCKFILE_TOOLS, Tool


CONFIG_PATH_ENV_VAR = "GOPROJECT_CONFIG"
WORKSPACE_ENV_VAR = "GOPATH"


@dataclass(frozen=True)
class ResolverSettings:
    """Configuration injected into :class:`~goproject.core.ProjectResolver`."""

    workspace_root: Path | None = None
    lockfile_tools: tuple[Tool, ...] = DEFAULT_LOCKFILE_TOOLS

    def __post_init__(self) -> None:
        root = self.workspace_root
        if root is not None and str(root) in ("", "."):
            # An empty root is the same as no root at all.
            object.__setattr__(self, "workspace_root", None)
        elif root is not None and not root.is_absolute():
            raise ConfigError(f"Workspace root must be an absolute path: {root}")
        if not self.lockfile_tools:
            raise ConfigError("At least one lockfile tool must be enabled")
        if Tool.NONE in self.lockfile_tools:
            raise ConfigError("Tool.NONE cannot be used as a lockfile tool")
        if len(set(self.lockfile_tools)) != len(self.lockfile_tools):
            raise ConfigError("Lockfile tools must be unique")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, gopath: str | None = None) -> ResolverSettings:
        """Create settings from a parsed config mapping, validating fields."""
        raw_root = data.get("workspace_root")
        if raw_root is not None and not isinstance(raw_root, str):
            raise ConfigError("'workspace_root' must be a string")
        if not raw_root and gopath:
            raw_root = gopath.split(os.pathsep)[0]

        raw_tools = data.get("lockfile_tools")
        if raw_tools is None:
            tools = DEFAULT_LOCKFILE_TOOLS
        elif isinstance(raw_tools, list) and all(isinstance(t, str) for t in raw_tools):
            try:
                tools = tuple(Tool.from_name(t) for t in raw_tools)
            except ValueError as exc:
                raise ConfigError(str(exc)) from exc
        else:
            raise ConfigError("'lockfile_tools' must be a list of tool names")

        return cls(workspace_root=_absolute(raw_root), lockfile_tools=tools)


def _absolute(raw: str | None) -> Path | None:
    if not raw:
        return None
    return Path(os.path.abspath(os.path.expanduser(raw)))


def _resolve_config_path(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path | None:
    """Resolve the configuration file path.

    Priority:
    1. Explicit path argument
    2. GOPROJECT_CONFIG environment variable
    3. No file: settings then come from ``$GOPATH`` alone, so ``None`` is
       returned instead of a default path.
    """
    if path is not None:
        return Path(path)

    env = os.environ if environ is None else environ
    env_path = env.get(CONFIG_PATH_ENV_VAR)
    if env_path:
        return Path(env_path)

    return None


def load_settings(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> ResolverSettings:
    """Load and validate resolver settings.

    Args:
        path: Optional path to a YAML config file.
        environ: Environment to consult; defaults to ``os.environ``.

    Raises:
        ConfigError: If the file cannot be read or contains invalid data.
    """
    env = os.environ if environ is None else environ
    gopath = env.get(WORKSPACE_ENV_VAR)
    config_path = _resolve_config_path(path, env)

    if config_path is None:
        return ResolverSettings.from_dict({}, gopath=gopath)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration file: {exc}") from exc

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in configuration file {config_path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a YAML mapping")

    return ResolverSettings.from_dict(data, gopath=gopath)
