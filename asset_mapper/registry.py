"""In-memory registry of assets and entry groupings."""
import logging
from collections.abc import Iterator

from asset_mapper.asset import Asset, Entry
from asset_mapper.classifier import AssetType

logger = logging.getLogger(__name__)

DEFAULT_PUBLIC_PATH = "/"
DEFAULT_HASH_LENGTH = 10


class Registry:
    """Holds assets and named entries.

    Assets live in an ordered arena. Two indexes map source paths and
    public paths to arena positions, so both keys resolve to the same
    record. The registry does no locking; populate it before sharing it
    between threads.
    """

    def __init__(
        self,
        public_path: str = DEFAULT_PUBLIC_PATH,
        hash_length: int = DEFAULT_HASH_LENGTH,
    ):
        """Initialize an empty registry.

        Args:
            public_path: Prefix prepended to every computed public path
            hash_length: Length of content hashes for scanned assets, 0 disables
        """
        self.public_path = public_path
        self.hash_length = hash_length
        self._assets: list[Asset] = []
        self._by_source: dict[str, int] = {}
        self._by_public: dict[str, int] = {}
        self._entries: dict[str, Entry] = {}

    def __len__(self) -> int:
        return len(self._assets)

    def __iter__(self) -> Iterator[Asset]:
        return iter(list(self._assets))

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.lookup(path) is not None

    def _public_keys(self, asset: Asset) -> set[str]:
        # Webpack assets all resolve to the bare prefix
        keys = {asset.public_path, asset.unversioned_path}
        keys.discard(self.public_path)
        return keys

    def add(self, asset: Asset, overwrite: bool = False) -> bool:
        """Register an asset under its source and public paths.

        Args:
            asset: Asset to store
            overwrite: Replace an asset already stored under the same source path

        Returns:
            True if the asset was stored, False if an existing one was kept
        """
        index = self._by_source.get(asset.source_path)
        if index is not None:
            if not overwrite:
                logger.debug(f"Keeping existing asset for {asset.source_path}")
                return False
            previous = self._assets[index]
            for key in self._public_keys(previous):
                if self._by_public.get(key) == index:
                    del self._by_public[key]
            self._assets[index] = asset
        else:
            index = len(self._assets)
            self._assets.append(asset)
            self._by_source[asset.source_path] = index

        for key in self._public_keys(asset):
            self._by_public[key] = index
        return True

    def lookup(self, path: str) -> Asset | None:
        """Find the asset registered under a source or public path.

        One leading slash is stripped and source paths are tried first, so
        ``/a.js`` and ``a.js`` always resolve to the same asset.
        """
        key = path[1:] if path.startswith("/") else path
        index = self._by_source.get(key)
        if index is None:
            index = self._by_public.get(path)
        if index is None:
            return None
        return self._assets[index]

    def get(self, path: str) -> str:
        """Return the public path for a path, or the path itself if unknown."""
        asset = self.lookup(path)
        if asset is None:
            return path
        return asset.public_path

    def assets_of_type(self, asset_type: AssetType) -> list[Asset]:
        return [asset for asset in self._assets if asset.asset_type is asset_type]

    # Entry operations
    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def create_entry(self, name: str) -> Entry:
        """Return the entry with the given name, creating it if needed."""
        entry = self._entries.get(name)
        if entry is None:
            entry = Entry(name=name)
            self._entries[name] = entry
        return entry

    def get_entry(self, name: str) -> Entry | None:
        return self._entries.get(name)

    def entry_stylesheets(self, name: str) -> list[str]:
        entry = self._entries.get(name)
        if entry is None:
            return []
        return list(entry.stylesheets)

    def entry_scripts(self, name: str) -> list[str]:
        entry = self._entries.get(name)
        if entry is None:
            return []
        return list(entry.scripts)
