"""
Configuration for applications and test harnesses using the Form3 client.

The client itself takes a base URL and a transport and never reads files or
environment variables. This module is the opt-in way to get those values
from a YAML file and/or the environment.

Environment variables override file values:
- FORM3_API_BASE_URL
- FORM3_API_TIMEOUT (seconds)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

import yaml

DEFAULT_BASE_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 10.0


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class Form3Config:
    """Form3 API connection settings."""

    base_url: str
    # Per-call timeout applied by the default transport (seconds)
    timeout: float = DEFAULT_TIMEOUT

    def validate(self) -> list[str]:
        """Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors: list[str] = []

        if not self.base_url:
            errors.append("form3.base_url is required")
        elif urlparse(self.base_url).scheme not in ("http", "https"):
            errors.append(f"form3.base_url must be an http(s) URL, got {self.base_url!r}")

        if self.timeout <= 0:
            errors.append("form3.timeout must be positive")

        return errors


def load_config(config_path: Path | None = None) -> Form3Config:
    """
    Load configuration from an optional YAML file and the environment.

    File layout:

        form3:
          base_url: "http://localhost:8080"
          timeout: 10

    Raises:
        ConfigValidationError: If the resulting configuration is invalid
    """
    data: dict = {}
    if config_path is not None and config_path.exists():
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

    form3_data = data.get("form3") or {}

    timeout_raw = os.environ.get("FORM3_API_TIMEOUT", form3_data.get("timeout", DEFAULT_TIMEOUT))
    try:
        timeout = float(timeout_raw)
    except (TypeError, ValueError) as e:
        raise ConfigValidationError(f"form3.timeout must be a number, got {timeout_raw!r}") from e

    config = Form3Config(
        base_url=os.environ.get("FORM3_API_BASE_URL") or form3_data.get("base_url", DEFAULT_BASE_URL),
        timeout=timeout,
    )

    errors = config.validate()
    if errors:
        raise ConfigValidationError("; ".join(errors))

    return config
