"""Shared pytest fixtures for asset_mapper tests."""
import json

import pytest

from asset_mapper.mapper import AssetMapper
from asset_mapper.registry import Registry


@pytest.fixture
def asset_files():
    """Return the files written by the asset_dir fixture."""
    return {
        "assets/css/style.css": b"body { color: red; }\n",
        "assets/js/app.js": b"console.log('app');\n",
        "assets/img/logo.png": b"\x89PNG\r\n\x1a\nfake",
        "assets/fonts/inter.woff2": b"wOF2fake",
        "assets/nested/deep/readme.txt": b"hello\n",
    }


@pytest.fixture
def asset_dir(tmp_path, monkeypatch, asset_files):
    """Create an ``assets`` tree and make its parent the working directory."""
    for relative, content in asset_files.items():
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)

    monkeypatch.chdir(tmp_path)
    return tmp_path / "assets"


@pytest.fixture
def registry():
    """Create an empty Registry with default settings."""
    return Registry()


@pytest.fixture
def mapper():
    """Create an empty AssetMapper with default settings."""
    return AssetMapper()


@pytest.fixture
def vite_manifest_dict():
    """Sample Vite manifest contents."""
    return {
        "src/app.js": {
            "file": "assets/app-XYZ.js",
            "src": "src/app.js",
            "name": "app",
            "isEntry": True,
            "css": ["assets/app-ABC.css"],
            "imports": ["_shared-DEF.js"],
        },
        "src/admin.js": {
            "file": "assets/admin-123.js",
            "name": "admin",
            "isEntry": True,
            "css": ["assets/admin-456.css", "assets/theme-789.css"],
        },
        "_shared-DEF.js": {
            "file": "assets/shared-DEF.js",
            "name": "shared",
        },
        "src/lazy.js": {
            "file": "assets/lazy-000.js",
            "name": "lazy",
            "isDynamicEntry": True,
        },
    }


@pytest.fixture
def vite_manifest(tmp_path, vite_manifest_dict):
    """Write the sample Vite manifest to disk."""
    path = tmp_path / ".vite" / "manifest.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(vite_manifest_dict, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def webpack_manifest(tmp_path):
    """Write a sample flat Webpack manifest to disk."""
    path = tmp_path / "bundle" / "manifest.json"
    path.parent.mkdir(parents=True)
    path.write_text(
        json.dumps({
            "bundle.js": "/bundle/bundle.3f2a1c.js",
            "bundle.css": "/bundle/bundle.9b8e7d.css",
            "runtime.js": "/bundle/runtime.11aa22.js",
        }),
        encoding="utf-8",
    )
    return path
