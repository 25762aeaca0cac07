"""Asset resolution and tag helpers for templates."""
import logging
from pathlib import Path

from markupsafe import Markup

from asset_mapper import tags
from asset_mapper.classifier import AssetType, classify
from asset_mapper.config import Config
from asset_mapper.manifests.loader import ManifestConfig, load_manifest
from asset_mapper.registry import DEFAULT_HASH_LENGTH, DEFAULT_PUBLIC_PATH, Registry
from asset_mapper.scanner import scan_directory

logger = logging.getLogger(__name__)


class AssetMapper:
    """Maps logical asset paths to versioned public paths.

    Populate it once at startup with :meth:`scan_dir` and/or
    :meth:`use_manifest`, then hand its helpers to the templating layer.
    Unknown paths are never an error: every lookup falls back to the path
    it was given.

    Example::

        mapper = AssetMapper(public_path="/static/")
        mapper.scan_dir("assets")
        mapper.link_tag("assets/style.css")
        # <link href="/static/assets/style.css?v=9f86d08188" rel="stylesheet"/>
    """

    def __init__(
        self,
        public_path: str = DEFAULT_PUBLIC_PATH,
        hash_length: int = DEFAULT_HASH_LENGTH,
    ):
        self.registry = Registry(public_path=public_path, hash_length=hash_length)

    @classmethod
    def from_config(cls, config: Config) -> "AssetMapper":
        """Build a mapper and run every configured scan, then every manifest load."""
        mapper = cls(
            public_path=config.assets.public_path,
            hash_length=config.assets.hash_length,
        )
        for directory in config.assets.scan_dirs:
            mapper.scan_dir(directory, renew=config.assets.renew)
        for manifest in config.manifests:
            mapper.use_manifest(manifest)
        return mapper

    @property
    def public_path(self) -> str:
        return self.registry.public_path

    @property
    def hash_length(self) -> int:
        return self.registry.hash_length

    # Population
    def scan_dir(self, directory: str | Path, renew: bool = False) -> int:
        """Register every file under a directory.

        Args:
            directory: Directory to walk
            renew: Replace assets registered by an earlier scan

        Returns:
            Number of files visited

        Raises:
            OSError: If the directory or a file in it cannot be read
        """
        return scan_directory(directory, self.registry, renew=renew)

    def use_manifest(self, manifest: ManifestConfig) -> int:
        """Register the assets declared by a build manifest.

        Raises:
            OSError: If the manifest cannot be read
            ManifestDecodeError: If the manifest is malformed
            UnknownManifestType: If the manifest type is not supported
        """
        return load_manifest(manifest, self.registry)

    # Lookups
    def get(self, path: str) -> str:
        """Return the versioned public path, or ``path`` unchanged if unknown."""
        return self.registry.get(path)

    def _typed_link(self, path: str, asset_type: AssetType) -> str:
        if classify(path) is not asset_type:
            return path
        return self.registry.get(path)

    def css_link(self, path: str) -> str:
        """Like :meth:`get`, but only resolves stylesheet paths."""
        return self._typed_link(path, AssetType.STYLESHEET)

    def js_link(self, path: str) -> str:
        """Like :meth:`get`, but only resolves script paths."""
        return self._typed_link(path, AssetType.SCRIPT)

    def image_link(self, path: str) -> str:
        return self._typed_link(path, AssetType.IMAGE)

    def other_link(self, path: str) -> str:
        return self._typed_link(path, AssetType.OTHER)

    def entry_stylesheets(self, name: str) -> list[str]:
        return self.registry.entry_stylesheets(name)

    def entry_scripts(self, name: str) -> list[str]:
        return self.registry.entry_scripts(name)

    # Tags
    def script_tag(self, path: str, *attrs: str) -> Markup:
        """Render a script tag for an asset.

        Extra attributes are passed as a flat key/value list, since
        templates cannot always build dicts::

            {{ script_tag("other.js", "type", "module", "id", "other-script") }}
            {{ script_tag("deferred.js", "defer", "") }}

        Raises:
            MalformedAttributeList: If ``attrs`` has an odd length
        """
        return tags.script_tag(self.get(path), *attrs)

    def link_tag(self, path: str, *attrs: str) -> Markup:
        """Render a stylesheet link tag for an asset.

        A ``rel`` passed in ``attrs`` replaces the default ``stylesheet``.

        Raises:
            MalformedAttributeList: If ``attrs`` has an odd length
        """
        return tags.link_tag(self.get(path), *attrs)

    def css_link_tags_from_entry(self, name: str, *attrs: str) -> list[Markup]:
        """Render link tags for every stylesheet of an entry, in entry order."""
        # Reject odd attribute lists even when the entry is empty
        tags.attribute_pairs(attrs)
        return [tags.link_tag(href, *attrs) for href in self.entry_stylesheets(name)]

    def js_script_tags_from_entry(self, name: str, *attrs: str) -> list[Markup]:
        """Render script tags for every script of an entry, in entry order."""
        # Reject odd attribute lists even when the entry is empty
        tags.attribute_pairs(attrs)
        return [tags.script_tag(src, *attrs) for src in self.entry_scripts(name)]
