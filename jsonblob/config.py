"""Load jsonblob configuration from .jsonblob.toml and environment variables."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]

from .convert import DEFAULT_SENSITIVE_FRAGMENTS, is_sensitive
from .models import DEFAULT_MASK

DEFAULT_CONFIG_FILE = ".jsonblob.toml"
DEFAULT_FORMAT = "json"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class Config:
    """Resolved jsonblob configuration."""

    mask: bool = True
    placeholder: str = DEFAULT_MASK
    sensitive: list[str] = field(default_factory=lambda: list(DEFAULT_SENSITIVE_FRAGMENTS))
    output_format: str = DEFAULT_FORMAT

    # Problems found while loading, reported by validate_config()
    load_errors: list[str] = field(default_factory=list)

    def is_sensitive(self, key: str) -> bool:
        return is_sensitive(key, self.sensitive)


def _parse_bool(raw: str) -> Optional[bool]:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    return None


def load_config(
    config_path: Optional[str | Path] = None,
    *,
    mask: Optional[bool] = None,
    placeholder: Optional[str] = None,
    output_format: Optional[str] = None,
) -> Config:
    """Load configuration in priority order:

    1. Keyword arguments (CLI flags); ``None`` means "not given"
    2. Environment variables
    3. `.jsonblob.toml` file
    4. Built-in defaults
    """
    cfg = Config()

    # --- Load from TOML file ---
    path = Path(config_path or DEFAULT_CONFIG_FILE)
    if path.exists():
        raw = tomllib.loads(path.read_text(encoding="utf-8"))
        mask_section = raw.get("mask", {})
        enabled = mask_section.get("enabled", cfg.mask)
        if isinstance(enabled, bool):
            cfg.mask = enabled
        else:
            cfg.load_errors.append(f"mask.enabled must be a boolean, got {enabled!r}")
        cfg.placeholder = str(mask_section.get("placeholder", cfg.placeholder))
        if "sensitive" in mask_section:
            cfg.sensitive = [str(frag) for frag in mask_section["sensitive"]]

        output = raw.get("output", {})
        cfg.output_format = str(output.get("format", cfg.output_format))

    # --- Environment variable overrides ---
    if "JSONBLOB_MASK" in os.environ:
        parsed = _parse_bool(os.environ["JSONBLOB_MASK"])
        if parsed is None:
            cfg.load_errors.append(
                f"JSONBLOB_MASK must be a boolean, got {os.environ['JSONBLOB_MASK']!r}"
            )
        else:
            cfg.mask = parsed

    if "JSONBLOB_MASK_PLACEHOLDER" in os.environ:
        cfg.placeholder = os.environ["JSONBLOB_MASK_PLACEHOLDER"]

    if "JSONBLOB_SENSITIVE" in os.environ:
        cfg.sensitive = [frag.strip() for frag in os.environ["JSONBLOB_SENSITIVE"].split(",")]

    # --- CLI overrides ---
    if mask is not None:
        cfg.mask = mask
    if placeholder is not None:
        cfg.placeholder = placeholder
    if output_format is not None:
        cfg.output_format = output_format

    return cfg


def validate_config(cfg: Config) -> list[str]:
    """Return a list of validation error strings (empty = valid)."""
    errors: list[str] = list(cfg.load_errors)

    if not cfg.placeholder:
        errors.append("mask.placeholder must not be empty.")

    if any(not frag for frag in cfg.sensitive):
        errors.append("mask.sensitive must not contain empty fragments.")

    valid_formats = {"json", "table"}
    if cfg.output_format not in valid_formats:
        errors.append(
            f"Invalid output format '{cfg.output_format}'. "
            f"Must be one of: {', '.join(sorted(valid_formats))}"
        )

    return errors
