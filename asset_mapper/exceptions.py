"""Exception types raised by asset_mapper."""


class AssetMapperError(Exception):
    """Base class for asset_mapper errors."""
    pass


class ConfigurationError(AssetMapperError):
    """Raised when configuration is invalid."""
    pass


class ManifestDecodeError(AssetMapperError, ValueError):
    """Raised when a manifest file does not match its dialect's schema."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid manifest {path}: {reason}")


class UnknownManifestType(AssetMapperError, ValueError):
    """Raised when a manifest type is not one of the supported dialects."""

    def __init__(self, manifest_type):
        self.manifest_type = manifest_type
        super().__init__(f"Unknown manifest type: {manifest_type!r}")


class MalformedAttributeList(AssetMapperError, ValueError):
    """Raised when tag attributes are not given as key/value pairs."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"Tag attributes must be an even number of strings, got {count}"
        )
