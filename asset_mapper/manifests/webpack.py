"""Webpack manifest dialect."""
from typing import Any

from asset_mapper.asset import Asset
from asset_mapper.exceptions import ManifestDecodeError
from asset_mapper.manifests.base import ManifestParser
from asset_mapper.registry import Registry


class WebpackManifestParser(ManifestParser):
    """Parser for flat ``webpack-manifest-plugin`` manifests.

    Every asset resolves to the bare public path prefix; the output file
    name from the manifest is not appended. No entries are produced.
    """

    name = "webpack"

    def load_document(
        self, path: str, document: dict[str, Any], registry: Registry
    ) -> int:
        for key, output in document.items():
            if not isinstance(output, str):
                raise ManifestDecodeError(path, f"value of {key!r} must be a string")

        for key in document:
            registry.add(
                Asset(source_path=key, public_path=registry.public_path),
                overwrite=True,
            )

        return len(document)
