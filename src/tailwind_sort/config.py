"""Plugin configuration: defaults, per-key validation and diagnostics."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "TAILWIND_SORT_CONFIG"
CONFIG_SECTION = "tailwindcss"

DEFAULT_FUNCTIONS = ("classnames", "clsx", "ctl", "cva", "tw")
DEFAULT_ATTRIBUTES = ("class", "className")
FILE_EXTENSIONS = ("html", "htm", "jsx", "tsx", "vue", "svelte", "astro")

_BOOL = TypeAdapter(bool)
_NAMES = TypeAdapter(list[str])


class Configuration(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    enabled: bool = True
    tailwind_functions: list[str] = Field(default_factory=lambda: list(DEFAULT_FUNCTIONS), alias="tailwindFunctions")
    tailwind_attributes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ATTRIBUTES), alias="tailwindAttributes"
    )


class ConfigurationDiagnostic(BaseModel):
    property_name: str
    message: str


class ResolvedConfiguration(BaseModel):
    config: Configuration
    diagnostics: list[ConfigurationDiagnostic] = Field(default_factory=list)
    file_extensions: list[str] = Field(default_factory=lambda: list(FILE_EXTENSIONS))


def _resolve_bool(key: str, value: Any, diagnostics: list[ConfigurationDiagnostic]) -> bool | None:
    try:
        return _BOOL.validate_python(value, strict=True)
    except ValidationError:
        diagnostics.append(ConfigurationDiagnostic(property_name=key, message=f"Expected boolean for '{key}'"))
        return None


def _resolve_names(key: str, value: Any, diagnostics: list[ConfigurationDiagnostic]) -> list[str] | None:
    if not isinstance(value, list):
        diagnostics.append(ConfigurationDiagnostic(property_name=key, message=f"Expected array for '{key}'"))
        return None
    try:
        return _NAMES.validate_python(value, strict=True)
    except ValidationError:
        diagnostics.append(
            ConfigurationDiagnostic(property_name=key, message=f"Expected array of strings for '{key}'")
        )
        return None


def resolve_config(raw: Mapping[str, Any]) -> ResolvedConfiguration:
    """Resolve a raw camelCase mapping; invalid values fall back to defaults with a diagnostic."""
    remaining = dict(raw)
    diagnostics: list[ConfigurationDiagnostic] = []
    values: dict[str, Any] = {}

    enabled = remaining.pop("enabled", None)
    if enabled is not None:
        resolved_enabled = _resolve_bool("enabled", enabled, diagnostics)
        if resolved_enabled is not None:
            values["enabled"] = resolved_enabled

    for key, field in (("tailwindFunctions", "tailwind_functions"), ("tailwindAttributes", "tailwind_attributes")):
        value = remaining.pop(key, None)
        if value is None:
            continue
        names = _resolve_names(key, value, diagnostics)
        if names is not None:
            values[field] = names

    for key in remaining:
        diagnostics.append(ConfigurationDiagnostic(property_name=key, message="Unknown property in configuration"))

    return ResolvedConfiguration(config=Configuration(**values), diagnostics=diagnostics)


def load_config(path: str | Path | None = None) -> ResolvedConfiguration:
    """Load configuration from ``path`` or ``$TAILWIND_SORT_CONFIG``; defaults when neither is set.

    The file is JSON. A ``tailwindcss`` object inside it (dprint style) takes
    precedence over the top-level object.
    """
    source = path or os.getenv(CONFIG_ENV_VAR)
    if not source:
        return resolve_config({})

    config_path = Path(source)
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {config_path}") from None

    if isinstance(data, dict) and isinstance(data.get(CONFIG_SECTION), dict):
        data = data[CONFIG_SECTION]
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a JSON object: {config_path}")

    resolved = resolve_config(data)
    for diagnostic in resolved.diagnostics:
        logger.warning("%s: %s (%s)", config_path, diagnostic.message, diagnostic.property_name)
    return resolved
