"""Configuration model and loaders for Typograph.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `TypographConfig`: normalized settings for CLI commands.
- `ConfigLoader`: static construction helpers for `TypographConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
import shlex
from typing import Any, Mapping

import yaml

from .models.datatypes import OutputMode
from .parsing import (
    normalize_optional_string,
    parse_output_mode,
    parse_permissive_boolean,
)


@dataclass(slots=True)
class TypographConfig:
    """Runtime configuration for Typograph commands.

    Attributes:
        default_mode: Output mode used when no modifier flag is given.
        debug: Whether stage-level run logs are emitted.
        clipboard_command: Optional clipboard command line overriding autodetection.
    """

    default_mode: OutputMode = OutputMode.HTML
    debug: bool = False
    clipboard_command: str | None = None

    def validate(self) -> None:
        """Validate configuration values before use."""

        if not isinstance(self.default_mode, OutputMode):
            raise ValueError("`default_mode` must be an `OutputMode` value.")
        if self.clipboard_command is not None:
            if not self.clipboard_command.strip():
                raise ValueError("`clipboard_command` must not be blank when provided.")
            try:
                shlex.split(self.clipboard_command)
            except ValueError as exc:
                raise ValueError(
                    f"`clipboard_command` is not a valid command line: {exc}."
                ) from exc


class ConfigLoader:
    """Factory methods for creating `TypographConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"default_mode", "debug", "clipboard_command"})

    @staticmethod
    def from_yaml(path: Path) -> TypographConfig:
        """Create a validated config from a YAML file."""

        raw_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(raw_text, path)
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> TypographConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        raw_mode = normalize_optional_string(env_map.get("TYPOGRAPH_DEFAULT_MODE"))
        default_mode = (
            parse_output_mode(raw_mode, "TYPOGRAPH_DEFAULT_MODE")
            if raw_mode is not None
            else OutputMode.HTML
        )
        debug = ConfigLoader._optional_env_boolean(env_map, "TYPOGRAPH_DEBUG") or False
        clipboard_command = normalize_optional_string(
            env_map.get("TYPOGRAPH_CLIPBOARD_COMMAND")
        )

        config = TypographConfig(
            default_mode=default_mode,
            debug=debug,
            clipboard_command=clipboard_command,
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> TypographConfig:
        """Build a validated config from a parsed mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        default_mode = OutputMode.HTML
        if normalize_optional_string(payload.get("default_mode")) is not None:
            default_mode = parse_output_mode(payload["default_mode"], "default_mode")

        config = TypographConfig(
            default_mode=default_mode,
            debug=ConfigLoader._optional_boolean(payload, "debug", source_label, False),
            clipboard_command=normalize_optional_string(payload.get("clipboard_command")),
        )
        config.validate()
        return config

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if key not in env:
            return None
        parsed = parse_permissive_boolean(env.get(key))
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
