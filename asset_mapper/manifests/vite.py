"""Vite manifest dialect."""
import logging
from dataclasses import dataclass, field
from typing import Any

from asset_mapper.asset import Asset
from asset_mapper.exceptions import ManifestDecodeError
from asset_mapper.manifests.base import ManifestParser
from asset_mapper.registry import Registry

logger = logging.getLogger(__name__)


def _field(path: str, key: str, data: dict[str, Any], name: str, kind: type, default):
    value = data.get(name, default)
    if value is None:
        return default
    if not isinstance(value, kind):
        raise ManifestDecodeError(
            path, f"field {name!r} of {key!r} must be {kind.__name__}"
        )
    return value


def _string_list(path: str, key: str, data: dict[str, Any], name: str) -> list[str]:
    values = _field(path, key, data, name, list, [])
    if not all(isinstance(value, str) for value in values):
        raise ManifestDecodeError(
            path, f"field {name!r} of {key!r} must be a list of strings"
        )
    return list(values)


@dataclass
class ViteManifestRecord:
    """One chunk record of a Vite ``manifest.json``."""

    file: str
    src: str = ""
    name: str = ""
    is_entry: bool = False
    css: list[str] = field(default_factory=list)
    imports: list[str] = field(default_factory=list)
    is_dynamic_entry: bool = False

    @classmethod
    def from_dict(cls, path: str, key: str, data: Any) -> "ViteManifestRecord":
        """Decode a record, applying defaults for missing optional fields.

        Raises:
            ManifestDecodeError: If the record is not an object, has no
                ``file`` string, or a field has the wrong type
        """
        if not isinstance(data, dict):
            raise ManifestDecodeError(path, f"record {key!r} must be an object")
        if not isinstance(data.get("file"), str):
            raise ManifestDecodeError(path, f"record {key!r} has no 'file' string")

        return cls(
            file=data["file"],
            src=_field(path, key, data, "src", str, ""),
            name=_field(path, key, data, "name", str, ""),
            is_entry=_field(path, key, data, "isEntry", bool, False),
            css=_string_list(path, key, data, "css"),
            imports=_string_list(path, key, data, "imports"),
            is_dynamic_entry=_field(path, key, data, "isDynamicEntry", bool, False),
        )


class ViteManifestParser(ManifestParser):
    """Parser for Vite build manifests.

    Each record becomes an asset whose public path is the registry prefix
    plus the record's output file. Entry records also feed the entry named
    after them: their own output into the script list, their ``css``
    outputs into the stylesheet list.
    """

    name = "vite"

    def load_document(
        self, path: str, document: dict[str, Any], registry: Registry
    ) -> int:
        # Decode everything first so a bad record leaves this document unregistered
        records = [
            (key, ViteManifestRecord.from_dict(path, key, data))
            for key, data in document.items()
        ]

        for key, record in records:
            asset = Asset(source_path=key, public_path=registry.public_path + record.file)
            registry.add(asset, overwrite=True)

            if record.is_entry:
                entry = registry.create_entry(record.name)
                entry.add_script(asset.public_path)
                for css in record.css:
                    entry.add_stylesheet(registry.public_path + css)
                logger.debug(
                    f"Entry {record.name!r}: {asset.public_path} "
                    f"with {len(record.css)} stylesheet(s)"
                )

        return len(records)
