"""Directory scanning with content-hashed version tokens."""
import logging
import os
from pathlib import Path

from asset_mapper.asset import Asset
from asset_mapper.hasher import hash_file
from asset_mapper.registry import Registry

logger = logging.getLogger(__name__)


def _raise(error: OSError) -> None:
    raise error


def scan_directory(root: str | Path, registry: Registry, renew: bool = False) -> int:
    """Walk a directory and register every regular file as an asset.

    Source paths are the walked paths, i.e. ``root`` as given joined with
    the path below it, so scanning ``assets`` registers ``assets/app.css``.
    Directories and entries in them are visited in sorted order. Files are
    hashed with the registry's hash length and added with
    ``overwrite=renew``, so by default the first registered asset wins.

    Args:
        root: Directory to scan
        registry: Registry to populate
        renew: Replace assets already registered under the same source path

    Returns:
        Number of files visited

    Raises:
        OSError: On the first entry that cannot be listed or read. Assets
            registered before the failure are kept.
    """
    root = os.fspath(root)
    visited = 0
    added = 0

    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames.sort()
        for filename in sorted(filenames):
            file_path = os.path.normpath(os.path.join(dirpath, filename))
            if not os.path.isfile(file_path):
                logger.debug(f"Skipping non-regular file {file_path}")
                continue

            content_hash = hash_file(file_path, registry.hash_length)
            asset = Asset.scanned(file_path, registry.public_path, content_hash)
            visited += 1
            if registry.add(asset, overwrite=renew):
                added += 1
                logger.debug(f"Registered {asset.source_path} -> {asset.public_path}")

    logger.info(f"Scanned {visited} files in {root} ({added} registered)")
    return visited
