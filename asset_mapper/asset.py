"""Asset and entry records."""
from dataclasses import dataclass, field

from asset_mapper.classifier import AssetType, classify

VERSION_QUERY = "?v="


def normalize_path(path: str) -> str:
    """Normalize a discovered path into a logical source path.

    Backslashes become ``/`` and leading separators are stripped.
    """
    return path.replace("\\", "/").lstrip("/")


@dataclass(frozen=True)
class Asset:
    """A single resolved static asset.

    Attributes:
        source_path: Normalized logical path as discovered
        public_path: Path exposed to templates and browsers
        hash: Truncated content digest, empty when there is no version token
    """

    source_path: str
    public_path: str
    hash: str = ""

    @classmethod
    def scanned(cls, source_path: str, public_prefix: str, hash: str = "") -> "Asset":
        """Build an asset found by a directory scan.

        The version token is appended as a ``?v=`` query when present.
        """
        source_path = normalize_path(source_path)
        public_path = public_prefix + source_path
        if hash:
            public_path += VERSION_QUERY + hash
        return cls(source_path=source_path, public_path=public_path, hash=hash)

    @property
    def asset_type(self) -> AssetType:
        return classify(self.source_path)

    @property
    def unversioned_path(self) -> str:
        """Public path without the version query."""
        if self.hash:
            return self.public_path.rsplit(VERSION_QUERY, 1)[0]
        return self.public_path


@dataclass
class Entry:
    """Named group of stylesheet and script public paths.

    Lists keep insertion order and may contain duplicates.
    """

    name: str
    stylesheets: list[str] = field(default_factory=list)
    scripts: list[str] = field(default_factory=list)

    def add_stylesheet(self, public_path: str) -> None:
        self.stylesheets.append(public_path)

    def add_script(self, public_path: str) -> None:
        self.scripts.append(public_path)
