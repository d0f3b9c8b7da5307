"""Configuration loading utilities for the statement CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from . import paths
from .exceptions import ConfigurationError

SUPPORTED_BANKS: tuple[str, ...] = ("scb", "kbank")
OUTPUT_FORMATS: tuple[str, ...] = ("csv", "json")


@dataclass(frozen=True, slots=True)
class ConversionSettings:
    """Statement conversion configuration."""

    default_bank: str  # "scb" or "kbank"
    output_format: str  # "csv" or "json"
    output_dir: Path
    max_file_size_mb: int
    scb_debit_codes: tuple[str, ...]

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Top-level application configuration."""

    source_path: Path
    conversion: ConversionSettings


def _default_config() -> dict[str, Any]:
    return {
        "conversion": {
            "default_bank": "scb",
            "output_format": "csv",
            "output_dir": paths.DEFAULT_OUTPUT_DIR,
            "max_file_size_mb": 10,
            "scb_debit_codes": [],
        },
    }


ENV_OVERRIDE_SPEC: dict[str, tuple[str, type]] = {
    "conversion.default_bank": ("STMTCLI_DEFAULT_BANK", str),
    "conversion.output_format": ("STMTCLI_OUTPUT_FORMAT", str),
    "conversion.output_dir": ("STMTCLI_OUTPUT_DIR", str),
    "conversion.max_file_size_mb": ("STMTCLI_MAX_FILE_SIZE_MB", int),
    "conversion.scb_debit_codes": ("STMTCLI_SCB_DEBIT_CODES", list),
}


def load_config(
    config_path: str | Path | None = None,
    env: Mapping[str, str] | None = None,
) -> AppConfig:
    """Load configuration from defaults, YAML file, and env overrides."""
    env = dict(os.environ if env is None else env)
    resolved_config_path = _resolve_config_path(config_path, env)
    file_data = _load_yaml(resolved_config_path)
    merged: dict[str, Any] = _deep_merge(_default_config(), file_data)
    merged = _apply_env_overrides(merged, env)
    return _build_config(merged, resolved_config_path)


def _resolve_config_path(config_path: str | Path | None, env: Mapping[str, str]) -> Path:
    if config_path:
        return paths.resolve_path(config_path)
    return paths.default_config_path(env=env)


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as handle:
        try:
            data = yaml.safe_load(handle) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Config file at {path} is not valid YAML: {exc}") from exc
        if not isinstance(data, MutableMapping):
            raise ConfigurationError(f"Config file at {path} must define a mapping root object.")
        return dict(data)


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _apply_env_overrides(config: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    config_copy = _deep_merge(config, {})
    for dotted_key, (env_key, expected_type) in ENV_OVERRIDE_SPEC.items():
        if env_key not in env:
            continue
        raw_value = env[env_key]
        try:
            value = _coerce_env_value(raw_value, expected_type)
        except ValueError as exc:
            raise ConfigurationError(
                f"Environment override {env_key} has invalid value '{raw_value}': {exc}"
            ) from exc
        _assign_nested(config_copy, dotted_key.split("."), value)
    return config_copy


def _coerce_env_value(raw: str, expected_type: type) -> Any:
    cleaned = raw.strip()
    if expected_type is int:
        return int(cleaned)
    if expected_type is list:
        if not cleaned:
            return []
        return tuple(part.strip() for part in cleaned.split(",") if part.strip())
    return cleaned


def _assign_nested(target: MutableMapping[str, Any], keys: list[str], value: Any) -> None:
    current = target
    for key in keys[:-1]:
        if key not in current or not isinstance(current[key], MutableMapping):
            current[key] = {}
        current = current[key]  # type: ignore[assignment]
    current[keys[-1]] = value


def _build_config(data: Mapping[str, Any], source_path: Path) -> AppConfig:
    try:
        conv_cfg = data["conversion"]
        conversion = ConversionSettings(
            default_bank=str(conv_cfg["default_bank"]).strip().lower(),
            output_format=str(conv_cfg["output_format"]).strip().lower(),
            output_dir=paths.resolve_path(str(conv_cfg["output_dir"])),
            max_file_size_mb=int(conv_cfg["max_file_size_mb"]),
            scb_debit_codes=_normalize_codes(conv_cfg["scb_debit_codes"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid configuration structure: {exc}") from exc

    if conversion.default_bank not in SUPPORTED_BANKS:
        raise ConfigurationError(
            f"conversion.default_bank must be one of {', '.join(SUPPORTED_BANKS)}; "
            f"got '{conversion.default_bank}'."
        )
    if conversion.output_format not in OUTPUT_FORMATS:
        raise ConfigurationError(
            f"conversion.output_format must be one of {', '.join(OUTPUT_FORMATS)}; "
            f"got '{conversion.output_format}'."
        )
    if conversion.max_file_size_mb <= 0:
        raise ConfigurationError("conversion.max_file_size_mb must be a positive integer.")

    return AppConfig(source_path=source_path, conversion=conversion)


def _normalize_codes(raw: Any) -> tuple[str, ...]:
    if not raw:
        return ()
    if isinstance(raw, str):
        raw = raw.split(",")
    return tuple(str(code).strip().upper() for code in raw if str(code).strip())
