"""Asset classification by file suffix."""
from enum import Enum


class AssetType(str, Enum):
    """Category of a static asset."""

    STYLESHEET = "stylesheet"
    SCRIPT = "script"
    IMAGE = "image"
    OTHER = "other"


STYLESHEET_SUFFIXES = frozenset({".css"})
SCRIPT_SUFFIXES = frozenset({".js"})
IMAGE_SUFFIXES = frozenset({
    ".webp", ".jpg", ".jpeg", ".jpe", ".jfif", ".jif",
    ".png", ".gif", ".tiff", ".tif", ".svg", ".avif",
})


def _suffix(path: str) -> str:
    # Only the final path segment can carry the extension
    name = path.rsplit("/", 1)[-1]
    dot = name.rfind(".")
    if dot == -1:
        return ""
    return name[dot:]


def classify(path: str) -> AssetType:
    """Return the asset category for a path.

    Matching is case-sensitive, so ``logo.PNG`` is OTHER.
    """
    suffix = _suffix(path)
    if suffix in STYLESHEET_SUFFIXES:
        return AssetType.STYLESHEET
    if suffix in SCRIPT_SUFFIXES:
        return AssetType.SCRIPT
    if suffix in IMAGE_SUFFIXES:
        return AssetType.IMAGE
    return AssetType.OTHER


def is_stylesheet(path: str) -> bool:
    return classify(path) is AssetType.STYLESHEET


def is_script(path: str) -> bool:
    return classify(path) is AssetType.SCRIPT


def is_image(path: str) -> bool:
    return classify(path) is AssetType.IMAGE
