# Deposition Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

"""
Configuration loading and validation.

Secrets come from the environment (optionally populated from a `.env` file by
the CLI). Tuning values come from an optional `deposition.yaml`. Both are
validated into frozen dataclasses so that the pipeline can rely on typed,
immutable configuration objects.

Environment variables:
    - `LLM_OPENAI_API_KEY`: API key (falls back to `OPENAI_API_KEY`)
    - `LLM_OPENAI_MODEL`: Model identifier
    - `LLM_OPENAI_BASE_URL`: Optional base URL of an OpenAI-compatible endpoint
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Mapping

import yaml


DEFAULT_MODEL = "gpt-4o-mini"


class ConfigError(RuntimeError):
    """
    Raised when the configuration is missing, invalid, or cannot be parsed.
    """

    pass


@dataclass(frozen=True)
class LlmConfig:
    """
    Connection settings for the language model endpoint.

    Attributes:
        api_key:
            API credential. Must not be empty.
        model:
            Model identifier.
        base_url:
            Optional base URL ending with `/v1`. The SDK default is used when
            omitted.
        temperature:
            Sampling temperature.
        max_tokens:
            Upper bound for the reply length of the examination stages.
        timeout_seconds:
            Optional request timeout. The SDK default applies when omitted.
    """

    api_key: str
    model: str = DEFAULT_MODEL
    base_url: str | None = None
    temperature: float = 0.1
    max_tokens: int = 1500
    timeout_seconds: float | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ConfigError(
                "OpenAI API key not configured. Please set LLM_OPENAI_API_KEY (or OPENAI_API_KEY)."
            )
        if not isinstance(self.model, str) or not self.model.strip():
            raise ConfigError("LLM model must be a non-empty string")

    def __repr__(self) -> str:
        return (
            f"LlmConfig(api_key='{self.api_key[:6]}...', model={self.model!r}, "
            f"base_url={self.base_url!r})"
        )


@dataclass(frozen=True)
class LimitsConfig:
    """
    Character budgets for the text handed to the extractor.

    Attributes:
        boundary_prefix_chars:
            Prefix of the transcript sent to the boundary extractor.
        role_window_chars:
            Window (starting at the resolved boundary) sent to the role
            extractor.
        caption_chars:
            Prefix of the caption text sent to the caption extractor.
        preview_chars:
            Length of the preview text taken from the boundary line.
    """

    boundary_prefix_chars: int = 5000
    role_window_chars: int = 8000
    caption_chars: int = 3000
    preview_chars: int = 100


@dataclass(frozen=True)
class ScannerConfig:
    """
    Tuning for the question-start heuristics of the fallback scanner.

    Attributes:
        heuristic_min_line:
            Heuristic matches are only accepted on lines with a greater index.
        heuristic_min_length:
            Heuristic matches are only accepted if the trimmed line is longer.
    """

    heuristic_min_line: int = 10
    heuristic_min_length: int = 20


@dataclass(frozen=True)
class LlmOverrides:
    """Model settings from the YAML file. `None` means "keep the default"."""

    model: str | None = None
    temperature: float | None = None
    max_tokens: int | None = None
    timeout_seconds: float | None = None


@dataclass(frozen=True)
class Settings:
    """
    Parsed tuning configuration.

    Attributes:
        config_path:
            YAML file the settings were read from, or None for defaults.
        limits:
            Character budgets.
        scanner:
            Fallback scanner tuning.
        llm:
            Model overrides applied on top of the environment.
    """

    config_path: Path | None = None
    limits: LimitsConfig = field(default_factory=LimitsConfig)
    scanner: ScannerConfig = field(default_factory=ScannerConfig)
    llm: LlmOverrides = field(default_factory=LlmOverrides)


def find_config_path(cli_path: str | None) -> tuple[Path, bool]:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        Tuple of (path, explicit). `explicit` is True if the path was given by
        the user and therefore must exist.
    """

    if cli_path:
        return Path(cli_path), True

    return Path.cwd() / "deposition.yaml", False


def load_settings(path: Path | None, *, required: bool = False) -> Settings:
    """
    Load and validate a `deposition.yaml` file.

    Args:
        path:
            Path to the YAML file. None yields the defaults.
        required:
            If True, a missing file is an error. Otherwise defaults are used.

    Returns:
        A validated Settings instance.

    Raises:
        ConfigError:
            If the file is required but missing, cannot be parsed, or contains
            invalid values.
    """

    if path is None:
        return Settings()

    if not path.exists():
        if required:
            raise ConfigError(f"Config file not found: {path}")
        return Settings()
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    return Settings(
        config_path=path.resolve(),
        limits=_parse_limits(raw.get("limits")),
        scanner=_parse_scanner(raw.get("scanner")),
        llm=_parse_llm(raw.get("llm")),
    )


def load_llm_config(
    settings: Settings | None = None,
    environ: Mapping[str, str] | None = None,
) -> LlmConfig:
    """
    Build the model connection settings from the environment.

    Args:
        settings:
            Optional settings whose `llm` overrides are applied.
        environ:
            Environment mapping. Defaults to `os.environ`.

    Returns:
        A validated LlmConfig.

    Raises:
        ConfigError:
            If the API key is missing.
    """

    env = os.environ if environ is None else environ

    api_key = (env.get("LLM_OPENAI_API_KEY") or env.get("OPENAI_API_KEY") or "").strip()
    model = (env.get("LLM_OPENAI_MODEL") or "").strip() or DEFAULT_MODEL
    base_url = (env.get("LLM_OPENAI_BASE_URL") or "").strip().rstrip("/") or None

    config = LlmConfig(api_key=api_key, model=model, base_url=base_url)

    if settings is None:
        return config

    overrides = settings.llm
    changes: dict[str, Any] = {}
    if overrides.model is not None:
        changes["model"] = overrides.model
    if overrides.temperature is not None:
        changes["temperature"] = overrides.temperature
    if overrides.max_tokens is not None:
        changes["max_tokens"] = overrides.max_tokens
    if overrides.timeout_seconds is not None:
        changes["timeout_seconds"] = overrides.timeout_seconds

    return replace(config, **changes) if changes else config


def has_api_key(environ: Mapping[str, str] | None = None) -> bool:
    """Return True if an API key is present in the environment."""

    env = os.environ if environ is None else environ
    return bool((env.get("LLM_OPENAI_API_KEY") or env.get("OPENAI_API_KEY") or "").strip())


def _positive_int(section: str, key: str, value: Any) -> int:
    # bool is a subclass of int, reject it explicitly
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"{section}.{key} must be an integer")
    if value <= 0:
        raise ConfigError(f"{section}.{key} must be > 0")
    return value


def _non_negative_int(section: str, key: str, value: Any) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigError(f"{section}.{key} must be an integer")
    if value < 0:
        raise ConfigError(f"{section}.{key} must be >= 0")
    return value


def _parse_limits(value: Any) -> LimitsConfig:
    """
    Parse and validate the optional `limits` section.

    Args:
        value:
            Raw YAML value for the `limits` key.

    Returns:
        A LimitsConfig instance (with defaults if the section is missing).

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return LimitsConfig()

    if not isinstance(value, dict):
        raise ConfigError("'limits' must be a mapping if provided")

    defaults = LimitsConfig()
    return LimitsConfig(
        boundary_prefix_chars=_positive_int(
            "limits",
            "boundary_prefix_chars",
            value.get("boundary_prefix_chars", defaults.boundary_prefix_chars),
        ),
        role_window_chars=_positive_int(
            "limits",
            "role_window_chars",
            value.get("role_window_chars", defaults.role_window_chars),
        ),
        caption_chars=_positive_int(
            "limits",
            "caption_chars",
            value.get("caption_chars", defaults.caption_chars),
        ),
        preview_chars=_positive_int(
            "limits",
            "preview_chars",
            value.get("preview_chars", defaults.preview_chars),
        ),
    )


def _parse_scanner(value: Any) -> ScannerConfig:
    """
    Parse and validate the optional `scanner` section.

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return ScannerConfig()

    if not isinstance(value, dict):
        raise ConfigError("'scanner' must be a mapping if provided")

    defaults = ScannerConfig()
    return ScannerConfig(
        heuristic_min_line=_non_negative_int(
            "scanner",
            "heuristic_min_line",
            value.get("heuristic_min_line", defaults.heuristic_min_line),
        ),
        heuristic_min_length=_non_negative_int(
            "scanner",
            "heuristic_min_length",
            value.get("heuristic_min_length", defaults.heuristic_min_length),
        ),
    )


def _parse_llm(value: Any) -> LlmOverrides:
    """
    Parse and validate the optional `llm` section.

    The API key is deliberately not read from YAML.

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return LlmOverrides()

    if not isinstance(value, dict):
        raise ConfigError("'llm' must be a mapping if provided")

    if "api_key" in value:
        raise ConfigError("llm.api_key is not supported; set LLM_OPENAI_API_KEY in the environment")

    model = value.get("model")
    if model is not None and (not isinstance(model, str) or not model.strip()):
        raise ConfigError("llm.model must be a non-empty string if provided")

    temperature = value.get("temperature")
    if temperature is not None:
        if not isinstance(temperature, (int, float)) or isinstance(temperature, bool):
            raise ConfigError("llm.temperature must be a number")
        if not 0 <= temperature <= 2:
            raise ConfigError("llm.temperature must be between 0 and 2")

    max_tokens = value.get("max_tokens")
    if max_tokens is not None:
        max_tokens = _positive_int("llm", "max_tokens", max_tokens)

    timeout = value.get("timeout_seconds")
    if timeout is not None:
        if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout <= 0:
            raise ConfigError("llm.timeout_seconds must be a positive number")

    return LlmOverrides(
        model=model.strip() if isinstance(model, str) else None,
        temperature=float(temperature) if temperature is not None else None,
        max_tokens=max_tokens,
        timeout_seconds=float(timeout) if timeout is not None else None,
    )
