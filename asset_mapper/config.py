"""Configuration loader and validator for asset_mapper."""
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from asset_mapper.exceptions import ConfigurationError
from asset_mapper.manifests.loader import ManifestConfig, ManifestType
from asset_mapper.registry import DEFAULT_HASH_LENGTH, DEFAULT_PUBLIC_PATH

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "./assets.yaml"


class AssetsConfig:
    """Asset discovery settings."""

    def __init__(self, data: dict[str, Any]):
        self.public_path: str = data.get("public_path", DEFAULT_PUBLIC_PATH)
        if not isinstance(self.public_path, str):
            raise ConfigurationError(
                f"assets.public_path must be a string, got: {self.public_path!r}"
            )

        self.hash_length: int = data.get("hash_length", DEFAULT_HASH_LENGTH)
        if (
            not isinstance(self.hash_length, int)
            or isinstance(self.hash_length, bool)
            or self.hash_length < 0
        ):
            raise ConfigurationError(
                f"assets.hash_length must be a non-negative integer, got: {self.hash_length!r}"
            )

        self.scan_dirs: list[str] = data.get("scan_dirs", [])
        if not isinstance(self.scan_dirs, list):
            raise ConfigurationError("assets.scan_dirs must be a list of directories")
        for directory in self.scan_dirs:
            if not isinstance(directory, str):
                raise ConfigurationError(
                    f"assets.scan_dirs entries must be strings, got: {directory!r}"
                )

        self.renew: bool = data.get("renew", False)
        if not isinstance(self.renew, bool):
            raise ConfigurationError(f"assets.renew must be true or false, got: {self.renew!r}")


def parse_manifest(data: Any, position: int) -> ManifestConfig:
    """Build a ManifestConfig from one ``manifests`` list item.

    Raises:
        ConfigurationError: If the path is missing or the type is unknown
    """
    if not isinstance(data, dict) or not data.get("path"):
        raise ConfigurationError(f"manifests[{position}] must have a 'path'")

    manifest_type = data.get("type", ManifestType.VITE.value)
    try:
        manifest_type = ManifestType(manifest_type)
    except ValueError:
        supported = ", ".join(t.value for t in ManifestType)
        raise ConfigurationError(
            f"manifests[{position}].type must be one of: {supported}, got: {manifest_type!r}"
        ) from None

    return ManifestConfig(path=str(data["path"]), type=manifest_type)


class Config:
    """Main configuration class."""

    def __init__(self, config_path: str | None = None):
        """Load configuration from YAML file.

        Args:
            config_path: Path to config file. Defaults to $ASSET_MAPPER_CONFIG
                or ./assets.yaml
        """
        if config_path is None:
            config_path = os.getenv("ASSET_MAPPER_CONFIG", DEFAULT_CONFIG_PATH)

        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise ConfigurationError(f"Config file not found: {config_path}")

        with open(self.config_path, "r") as f:
            data = yaml.safe_load(f)

        if not data:
            raise ConfigurationError("Config file is empty")
        if not isinstance(data, dict):
            raise ConfigurationError("Config file must contain a mapping")

        self.assets = AssetsConfig(data.get("assets") or {})

        manifests_data = data.get("manifests") or []
        if not isinstance(manifests_data, list):
            raise ConfigurationError("manifests must be a list")
        self.manifests: list[ManifestConfig] = [
            parse_manifest(item, position)
            for position, item in enumerate(manifests_data)
        ]

        logger.debug(
            f"Loaded config {self.config_path}: "
            f"{len(self.assets.scan_dirs)} scan dir(s), {len(self.manifests)} manifest(s)"
        )


def load_config(config_path: str | None = None) -> Config:
    """Load and return configuration.

    Args:
        config_path: Optional path to config file

    Returns:
        Config object

    Raises:
        ConfigurationError: If configuration is invalid
    """
    return Config(config_path)
