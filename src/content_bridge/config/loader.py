"""
Settings Loader
===============

Loads session settings from ``.env`` files, an optional YAML file and
environment variables, validated with Pydantic.

Precedence (highest first): environment variables, YAML file, defaults.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from content_bridge.core import EnvVar, InvalidConfigurationError

from .models import SessionSettings

logger = logging.getLogger(__name__)


class ConfigLoader:
    """
    Session settings loader.

    Environment files are loaded once per loader, never overriding
    variables that are already set.
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """
        Initialize settings loader.

        Args:
            config_path: Optional path to a YAML settings file. If not
                provided, searches standard locations.
            environ: Environment mapping to read; ``os.environ`` by default
        """
        self.config_path = Path(config_path) if config_path else None
        self._environ = environ
        self._settings: SessionSettings | None = None
        self._load_env()

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def _load_env(self) -> None:
        """Load environment variables from the first ``.env`` file found."""
        env_candidates: list[Path] = [
            Path(".env"),
            Path(".env.local"),
            Path.home() / ".content_bridge" / ".env",
        ]

        for env_path in env_candidates:
            if env_path.exists():
                logger.info(f"Loading environment from {env_path}")
                load_dotenv(env_path, override=False)
                break

    def _find_config_file(self) -> Path | None:
        """Find settings file in standard locations."""
        if self.config_path:
            if self.config_path.exists():
                return self.config_path
            raise InvalidConfigurationError(
                f"Settings file not found: {self.config_path}"
            )

        env_path_str = self.environ.get(EnvVar.CONFIG.value)
        if env_path_str:
            path = Path(env_path_str).expanduser()
            if path.exists():
                return path
            logger.warning(f"{EnvVar.CONFIG.value} points to missing file {path}")

        candidates = [
            Path("content_bridge.yaml"),
            Path("config/content_bridge.yaml"),
            Path.home() / ".content_bridge" / "config.yaml",
        ]

        for candidate in candidates:
            if candidate.exists():
                return candidate

        return None

    def _read_file(self) -> dict[str, Any]:
        config_file = self._find_config_file()
        if not config_file:
            logger.debug("No settings file found, using defaults")
            return {}

        logger.info(f"Loading settings from {config_file}")
        try:
            with open(config_file, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise InvalidConfigurationError(
                f"Invalid YAML in {config_file}: {e}"
            ) from e

        if not data:
            logger.warning(f"Empty settings file: {config_file}, using defaults")
            return {}
        if not isinstance(data, dict):
            raise InvalidConfigurationError(
                f"Settings file {config_file} must contain a mapping"
            )
        return data

    def _env_overrides(self) -> dict[str, str]:
        env = self.environ
        overrides: dict[str, str] = {}

        model = env.get(EnvVar.MODEL.value)
        if model:
            overrides["model"] = model

        proxy = env.get(EnvVar.PROXY.value) or env.get(EnvVar.HTTPS_PROXY.value)
        if proxy:
            overrides["proxy"] = proxy

        version = env.get(EnvVar.CLI_VERSION.value)
        if version:
            overrides["cli_version"] = version

        return overrides

    def load(self) -> SessionSettings:
        """
        Load and validate settings.

        Returns:
            Validated session settings

        Raises:
            InvalidConfigurationError: If the file or values are invalid
        """
        if self._settings:
            return self._settings

        data = self._read_file()
        data.update(self._env_overrides())

        try:
            self._settings = SessionSettings.model_validate(data)
        except ValidationError as e:
            raise InvalidConfigurationError(f"Invalid settings: {e}") from e

        logger.debug(
            f"Settings loaded: model={self._settings.model}, "
            f"auth_type={self._settings.auth_type}, "
            f"proxy={'set' if self._settings.proxy else 'none'}"
        )
        return self._settings

    def reload(self) -> SessionSettings:
        """Reload settings from file and environment."""
        self._settings = None
        return self.load()


# Global loader instance
_global_loader: ConfigLoader | None = None


def load_settings(config_path: str | Path | None = None) -> SessionSettings:
    """
    Load global session settings.

    Args:
        config_path: Optional path to a YAML settings file

    Returns:
        Validated session settings
    """
    global _global_loader

    if _global_loader is None or config_path:
        _global_loader = ConfigLoader(config_path)

    return _global_loader.load()


def reload_settings() -> SessionSettings:
    """Reload global session settings."""
    global _global_loader

    if _global_loader is None:
        _global_loader = ConfigLoader()

    return _global_loader.reload()
