"""Configuration model and loaders for dayone-export.

Responsibilities:
- Define conversion settings as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `ConverterConfig`: normalized settings for one conversion run.
- `ConfigLoader`: static construction helpers for `ConverterConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_permissive_boolean


_DEFAULT_APP_NAME = "day-one-export"
_DEFAULT_SOURCE_FILENAME = "journal.json"
_DEFAULT_PLACEHOLDER = "[No content]"


@dataclass(slots=True)
class ConverterConfig:
    """Settings for one conversion run.

    Attributes:
        input_path: Day One `.zip` export or bare `Journal.json`.
        output_dir: Directory receiving the dated Markdown file.
        app_name: Prefix of the output filename.
        source_filename: Member name suffix searched for inside archives.
        placeholder: Body used for entries without usable text.
        write_output: Whether the CLI writes the document to `output_dir`.
    """

    input_path: Path
    output_dir: Path = Path("out")
    app_name: str = _DEFAULT_APP_NAME
    source_filename: str = _DEFAULT_SOURCE_FILENAME
    placeholder: str = _DEFAULT_PLACEHOLDER
    write_output: bool = True

    def validate(self) -> None:
        """Validate config values and raise `ValueError` on invalid settings."""

        if not str(self.input_path).strip():
            raise ValueError("`input_path` must not be empty.")
        if not self.app_name.strip():
            raise ValueError("`app_name` must not be empty.")
        if not self.placeholder.strip():
            raise ValueError("`placeholder` must not be empty.")
        if not self.source_filename.lower().endswith(".json"):
            raise ValueError("`source_filename` must end with `.json`.")


class ConfigLoader:
    """Factory methods for loading `ConverterConfig`."""

    _REQUIRED_YAML_KEYS = frozenset({"input_path"})
    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "input_path",
            "output_dir",
            "app_name",
            "source_filename",
            "placeholder",
            "write_output",
        }
    )

    @staticmethod
    def from_yaml(path: Path) -> ConverterConfig:
        """Create a validated config from a YAML file."""

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> ConverterConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        input_path = normalize_optional_string(env_map.get("DAYONE_EXPORT_INPUT"))
        if input_path is None:
            raise ValueError("Environment variable `DAYONE_EXPORT_INPUT` is required.")
        output_dir = normalize_optional_string(env_map.get("DAYONE_EXPORT_OUTPUT_DIR")) or "out"

        config = ConverterConfig(
            input_path=Path(input_path),
            output_dir=Path(output_dir),
            app_name=(
                normalize_optional_string(env_map.get("DAYONE_EXPORT_APP_NAME"))
                or _DEFAULT_APP_NAME
            ),
            source_filename=(
                normalize_optional_string(env_map.get("DAYONE_EXPORT_SOURCE_FILENAME"))
                or _DEFAULT_SOURCE_FILENAME
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str
    ) -> ConverterConfig:
        """Build a validated config from a mapping payload."""

        ConfigLoader._validate_yaml_keys(payload, source_label)

        input_path = normalize_optional_string(payload["input_path"])
        if input_path is None:
            raise ValueError(f"{source_label} requires non-empty `input_path`.")
        output_dir = normalize_optional_string(payload.get("output_dir")) or "out"

        write_output = True
        if "write_output" in payload:
            parsed = parse_permissive_boolean(payload["write_output"])
            if parsed is None:
                raise ValueError(
                    f"{source_label} field `write_output` must be a boolean value "
                    "(`true`/`false`, `1`/`0`, `yes`/`no`)."
                )
            write_output = parsed

        config = ConverterConfig(
            input_path=Path(input_path),
            output_dir=Path(output_dir),
            app_name=normalize_optional_string(payload.get("app_name")) or _DEFAULT_APP_NAME,
            source_filename=(
                normalize_optional_string(payload.get("source_filename"))
                or _DEFAULT_SOURCE_FILENAME
            ),
            placeholder=(
                normalize_optional_string(payload.get("placeholder")) or _DEFAULT_PLACEHOLDER
            ),
            write_output=write_output,
        )
        config.validate()
        return config

    @staticmethod
    def _validate_yaml_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Validate supported and required YAML keys."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        missing = sorted(
            key for key in ConfigLoader._REQUIRED_YAML_KEYS if key not in payload
        )
        if missing:
            key_list = ", ".join(missing)
            raise ValueError(f"{source_label} is missing required key(s): {key_list}.")
