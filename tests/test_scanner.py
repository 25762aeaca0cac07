"""Tests for scanner module."""
import hashlib
import os

import pytest

from asset_mapper.registry import Registry
from asset_mapper.scanner import scan_directory


def sha(content: bytes, length: int = 10) -> str:
    return hashlib.sha256(content).hexdigest()[:length]


class TestScanDirectory:
    """Tests for scan_directory function."""

    def test_registers_every_file(self, asset_dir, asset_files, registry):
        """Test every regular file becomes an asset."""
        count = scan_directory("assets", registry)

        assert count == len(asset_files)
        assert len(registry) == len(asset_files)
        for relative, content in asset_files.items():
            asset = registry.lookup(relative)
            assert asset is not None
            assert asset.hash == sha(content)
            assert asset.public_path == f"/{relative}?v={sha(content)}"

    def test_source_and_public_path_agree(self, asset_dir, registry):
        """Test get resolves both keys to the asset's public path."""
        scan_directory("assets", registry)
        asset = registry.lookup("assets/css/style.css")

        assert registry.get(asset.source_path) == asset.public_path
        assert registry.get(asset.public_path) == asset.public_path

    def test_public_prefix(self, asset_dir):
        """Test the registry prefix is prepended to public paths."""
        registry = Registry(public_path="/static/", hash_length=6)
        scan_directory("assets", registry)

        content = b"body { color: red; }\n"
        assert registry.get("assets/css/style.css") == (
            f"/static/assets/css/style.css?v={sha(content, 6)}"
        )

    def test_hashing_disabled(self, asset_dir):
        """Test hash_length 0 produces unversioned public paths."""
        registry = Registry(hash_length=0)
        scan_directory("assets", registry)

        asset = registry.lookup("assets/js/app.js")
        assert asset.hash == ""
        assert asset.public_path == "/assets/js/app.js"

    def test_directories_are_skipped(self, asset_dir, registry):
        """Test directories are not registered."""
        scan_directory("assets", registry)
        assert registry.lookup("assets/css") is None
        assert registry.lookup("assets/nested/deep") is None

    def test_walk_order_is_sorted(self, asset_dir, registry):
        """Test assets are registered in sorted path order."""
        scan_directory("assets", registry)
        paths = [asset.source_path for asset in registry]
        assert paths == sorted(paths)

    def test_rescan_is_idempotent(self, asset_dir, registry):
        """Test scanning an unchanged directory twice changes nothing."""
        scan_directory("assets", registry)
        first = list(registry)

        scan_directory("assets", registry)
        assert list(registry) == first

    def test_rescan_keeps_first_write(self, asset_dir, registry):
        """Test changed files keep their old hash without renew."""
        scan_directory("assets", registry)
        old = registry.get("assets/js/app.js")

        (asset_dir / "js" / "app.js").write_bytes(b"console.log('changed');\n")
        scan_directory("assets", registry)

        assert registry.get("assets/js/app.js") == old

    def test_rescan_with_renew(self, asset_dir, registry):
        """Test renew replaces assets with freshly hashed ones."""
        scan_directory("assets", registry)

        changed = b"console.log('changed');\n"
        (asset_dir / "js" / "app.js").write_bytes(changed)
        scan_directory("assets", registry, renew=True)

        assert registry.get("assets/js/app.js") == f"/assets/js/app.js?v={sha(changed)}"

    def test_absolute_root_strips_leading_separator(self, asset_dir):
        """Test an absolute root yields source paths without a leading slash."""
        registry = Registry(hash_length=0)
        scan_directory(asset_dir, registry)

        expected = os.path.join(str(asset_dir), "css", "style.css")
        expected = expected.replace("\\", "/").lstrip("/")
        assert registry.lookup(expected) is not None

    def test_missing_root_raises(self, tmp_path, registry):
        """Test a missing directory is reported as an IO failure."""
        with pytest.raises(FileNotFoundError):
            scan_directory(tmp_path / "missing", registry)
        assert len(registry) == 0

    def test_unreadable_file_aborts(self, asset_dir, registry, monkeypatch):
        """Test an unreadable file aborts the scan and keeps earlier assets."""
        from asset_mapper import scanner

        real_hash_file = scanner.hash_file

        def failing_hash_file(path, length):
            if os.fspath(path).replace("\\", "/").endswith("js/app.js"):
                raise PermissionError(13, "Permission denied", os.fspath(path))
            return real_hash_file(path, length)

        monkeypatch.setattr(scanner, "hash_file", failing_hash_file)

        with pytest.raises(PermissionError):
            scan_directory("assets", registry)

        # css/, fonts/ and img/ sort before js/, so they were registered first
        assert registry.lookup("assets/css/style.css") is not None
        assert registry.lookup("assets/fonts/inter.woff2") is not None
        assert registry.lookup("assets/img/logo.png") is not None
        assert registry.lookup("assets/js/app.js") is None
        assert registry.lookup("assets/nested/deep/readme.txt") is None
        assert len(registry) == 3
