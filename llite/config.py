"""Workspace configuration support for the llite CLI."""

from __future__ import annotations

import codecs
import json
import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from .errors import ConfigFileError
from .languages import LanguageSymbols

logger = logging.getLogger(__name__)

CONFIG_FILE_NAMES = ("llite.toml", ".lliterc")


@dataclass
class TranslateDefaults:
    """Defaults applied to ``translate`` when flags are not given."""

    language: Optional[str] = None
    indent: Optional[int] = None
    code_open: Optional[str] = None
    code_close: Optional[str] = None
    output_extension: str = ".mkd"
    encoding: str = "utf-8"


@dataclass
class WorkspaceConfig:
    """Resolved workspace configuration."""

    root: Path
    defaults: TranslateDefaults = field(default_factory=TranslateDefaults)
    languages: Dict[str, LanguageSymbols] = field(default_factory=dict)
    source: Optional[Path] = None
    raw: Dict[str, Any] = field(default_factory=dict)


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _optional_str(section: Dict[str, Any], key: str) -> Optional[str]:
    value = section.get(key)
    return str(value) if value is not None else None


def _parse_defaults(data: Dict[str, Any], path: Path) -> TranslateDefaults:
    section = data.get("defaults") or {}
    if not isinstance(section, dict):
        raise ConfigFileError("[defaults] must be a table", path=str(path))

    indent = section.get("indent")
    if indent is not None and (not isinstance(indent, int) or isinstance(indent, bool)):
        raise ConfigFileError(
            f"defaults.indent must be an integer, got {indent!r}", path=str(path)
        )

    encoding = str(section.get("encoding") or TranslateDefaults.encoding)
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigFileError(
            f"defaults.encoding names an unknown codec: {encoding!r}",
            path=str(path),
            hint="Use a Python codec name such as 'utf-8' or 'latin-1'",
        ) from exc

    extension = str(section.get("output_extension") or TranslateDefaults.output_extension)
    if not extension.startswith("."):
        extension = f".{extension}"

    return TranslateDefaults(
        language=_optional_str(section, "language"),
        indent=indent,
        code_open=_optional_str(section, "code_open"),
        code_close=_optional_str(section, "code_close"),
        output_extension=extension,
        encoding=encoding,
    )


def _parse_languages(data: Dict[str, Any], path: Path) -> Dict[str, LanguageSymbols]:
    section = data.get("languages") or {}
    if not isinstance(section, dict):
        raise ConfigFileError("[languages] must be a table", path=str(path))
    languages: Dict[str, LanguageSymbols] = {}
    for name, raw in section.items():
        if not isinstance(raw, dict):
            logger.warning("Ignoring language %r in %s: expected a table", name, path)
            continue
        start = raw.get("start")
        end = raw.get("end")
        if not start or not end:
            raise ConfigFileError(
                f"Language {name!r} needs both 'start' and 'end' delimiters",
                path=str(path),
            )
        languages[str(name)] = LanguageSymbols(str(name), str(start), str(end))
    return languages


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    if explicit is not None:
        return explicit if explicit.exists() else None
    for candidate in CONFIG_FILE_NAMES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_workspace_config(root: Path, explicit: Optional[Path] = None) -> WorkspaceConfig:
    """
    Load ``llite.toml`` (or ``.lliterc`` JSON) from ``root``.

    A missing file yields an empty configuration. An explicit path that
    does not exist is an error.
    """
    root = root.resolve()
    if explicit is not None and not explicit.exists():
        raise ConfigFileError(f"Configuration file not found: {explicit}", path=str(explicit))
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        return WorkspaceConfig(root=root)

    try:
        if config_path.suffix == ".toml":
            data = _read_toml_config(config_path)
        else:
            data = _read_json_config(config_path)
    except (tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigFileError(f"Cannot parse configuration: {exc}", path=str(config_path)) from exc

    if not isinstance(data, dict):
        raise ConfigFileError("Configuration root must be a table", path=str(config_path))

    logger.debug("Loaded workspace configuration from %s", config_path)
    return WorkspaceConfig(
        root=root,
        defaults=_parse_defaults(data, config_path),
        languages=_parse_languages(data, config_path),
        source=config_path,
        raw=data,
    )


__all__ = [
    "CONFIG_FILE_NAMES",
    "TranslateDefaults",
    "WorkspaceConfig",
    "locate_config_file",
    "load_workspace_config",
]
