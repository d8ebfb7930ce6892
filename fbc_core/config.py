"""Load catalog pipeline settings from ``config/config.toml``."""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

from fbc_core.catalog.splitter import SPLITTERS
from fbc_core.catalog.types import DEFAULT_CATALOG_FILENAMES, DEFAULT_OUTPUT_DIRNAME, CatalogConfig

log = logging.getLogger(__name__)

CONFIG_RELATIVE_PATH = Path("config") / "config.toml"
SPLIT_MODE_ENV = "FBC_SPLIT_MODE"


def _resolve_env_value(value: Any) -> Any:
    if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
        env_name = value[2:-1].strip()
        if env_name:
            return os.getenv(env_name, "")
    return value


def _to_bool(value: Any, default: bool) -> bool:
    value = _resolve_env_value(value)
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"expected a boolean, got {value!r}")


def _to_optional_int(value: Any) -> int | None:
    value = _resolve_env_value(value)
    if value is None or value == "":
        return None
    return int(value)


def _parse_split_mode(value: Any) -> str:
    value = _resolve_env_value(value)
    normalized = str(value).strip().lower() if value is not None else ""
    if not normalized:
        return "boundary"
    if normalized in SPLITTERS:
        return normalized
    raise ValueError(f"split_mode must be one of: {', '.join(sorted(SPLITTERS))}")


def _load_catalog_section(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        return {}
    try:
        payload = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        log.warning("ignoring unreadable config %s: %s", config_path, exc)
        return {}
    section = payload.get("catalog")
    return section if isinstance(section, dict) else {}


def config_from_mapping(section: Mapping[str, Any]) -> CatalogConfig:
    filenames_raw = section.get("catalog_filenames")
    if filenames_raw is None:
        filenames = DEFAULT_CATALOG_FILENAMES
    elif not isinstance(filenames_raw, list):
        raise ValueError(f"catalog_filenames: expected list, got {type(filenames_raw).__name__}")
    else:
        filenames = tuple(str(_resolve_env_value(item)).strip() for item in filenames_raw if str(item).strip())
    output_dirname = str(_resolve_env_value(section.get("output_dirname")) or DEFAULT_OUTPUT_DIRNAME)
    return CatalogConfig(
        recursive=_to_bool(section.get("recursive"), True),
        catalog_filenames=filenames,
        output_dirname=output_dirname,
        split_mode=_parse_split_mode(os.getenv(SPLIT_MODE_ENV) or section.get("split_mode")),
        output_indent=_to_optional_int(section.get("output_indent")),
    )


def load_catalog_config(workspace_root: Path | None = None, *, config_path: Path | None = None) -> CatalogConfig:
    """Build a ``CatalogConfig`` from the ``[catalog]`` table of the workspace config.

    A missing or unreadable file yields the defaults. ``FBC_SPLIT_MODE`` takes
    precedence over the file's ``split_mode``.
    """

    if config_path is None:
        base = Path(workspace_root) if workspace_root is not None else Path(".")
        config_path = base / CONFIG_RELATIVE_PATH
    return config_from_mapping(_load_catalog_section(config_path))
