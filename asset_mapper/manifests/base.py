"""Base manifest parser for asset_mapper."""
import json
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from asset_mapper.exceptions import ManifestDecodeError
from asset_mapper.registry import Registry

logger = logging.getLogger(__name__)

_decoder = json.JSONDecoder()


def iter_documents(path: str | Path) -> Iterator[dict[str, Any]]:
    """Yield each top-level JSON object of a manifest file.

    Manifests usually hold a single object, but several concatenated
    documents are accepted.

    Raises:
        OSError: If the file cannot be opened or read
        ManifestDecodeError: If the file is not UTF-8, or a document is not
            valid JSON or not an object
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise ManifestDecodeError(str(path), str(e)) from e

    position = 0
    length = len(text)
    while True:
        while position < length and text[position].isspace():
            position += 1
        if position >= length:
            return

        try:
            document, position = _decoder.raw_decode(text, position)
        except json.JSONDecodeError as e:
            raise ManifestDecodeError(str(path), str(e)) from e

        if not isinstance(document, dict):
            raise ManifestDecodeError(
                str(path), f"expected a JSON object, got {type(document).__name__}"
            )
        yield document


class ManifestParser(ABC):
    """Abstract base class for manifest dialects."""

    name: str = ""

    @abstractmethod
    def load_document(
        self, path: str, document: dict[str, Any], registry: Registry
    ) -> int:
        """Register the assets declared by one manifest document.

        Args:
            path: Manifest path, for error messages
            document: Decoded top-level object
            registry: Registry to populate

        Returns:
            Number of assets registered
        """
        pass

    def load(self, path: str | Path, registry: Registry) -> int:
        """Read a manifest file and register everything it declares.

        Assets are added with overwrite, so the last declaration of a key
        wins. Documents loaded before a decode error stay registered.

        Returns:
            Number of assets registered
        """
        path = str(path)
        total = 0
        documents = 0
        for document in iter_documents(path):
            documents += 1
            if not document:
                logger.warning(f"Empty {self.name} manifest document in {path}")
            total += self.load_document(path, document, registry)

        logger.info(
            f"Loaded {self.name} manifest {path}: "
            f"{total} assets from {documents} document(s)"
        )
        return total
