"""Manifest dialect selection."""
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from asset_mapper.exceptions import UnknownManifestType
from asset_mapper.manifests.base import ManifestParser
from asset_mapper.manifests.vite import ViteManifestParser
from asset_mapper.manifests.webpack import WebpackManifestParser
from asset_mapper.registry import Registry


class ManifestType(str, Enum):
    """Supported manifest generators."""

    VITE = "vite"
    WEBPACK = "webpack"


@dataclass(frozen=True)
class ManifestConfig:
    """Where a manifest lives and which dialect it is written in."""

    path: str | Path
    type: ManifestType = ManifestType.VITE


_PARSERS: dict[ManifestType, type[ManifestParser]] = {
    ManifestType.VITE: ViteManifestParser,
    ManifestType.WEBPACK: WebpackManifestParser,
}


def get_parser(manifest_type: ManifestType | str) -> ManifestParser:
    """Return the parser for a manifest type.

    Args:
        manifest_type: ManifestType member or its string value

    Raises:
        UnknownManifestType: If the type is not supported
    """
    try:
        manifest_type = ManifestType(manifest_type)
    except ValueError:
        raise UnknownManifestType(manifest_type) from None
    return _PARSERS[manifest_type]()


def load_manifest(manifest: ManifestConfig, registry: Registry) -> int:
    """Load a manifest into a registry using its configured dialect."""
    return get_parser(manifest.type).load(manifest.path, registry)
