"""HTML tag rendering for scripts and stylesheets."""
from collections.abc import Sequence

from markupsafe import Markup, escape

from asset_mapper.exceptions import MalformedAttributeList

BOOLEAN_ATTRIBUTES = frozenset({"async", "defer"})


def attribute_pairs(attrs: Sequence[str]) -> dict[str, str]:
    """Turn a flat ``key, value, key, value`` list into a dict.

    Later pairs replace earlier ones with the same key.

    Raises:
        MalformedAttributeList: If the list has an odd number of items
    """
    if len(attrs) % 2 != 0:
        raise MalformedAttributeList(len(attrs))

    return {str(attrs[i]): str(attrs[i + 1]) for i in range(0, len(attrs), 2)}


def render_attributes(attributes: dict[str, str]) -> str:
    """Serialize attributes, escaping every key and value.

    ``async`` and ``defer`` are rendered as bare attribute names.
    """
    parts = []
    for key, value in attributes.items():
        if key in BOOLEAN_ATTRIBUTES:
            parts.append(key)
            continue
        parts.append(f'{escape(key)}="{escape(value)}"')
    return " ".join(parts)


def _build(forced: tuple[str, str], defaults: dict[str, str], attrs: Sequence[str]) -> str:
    name, value = forced
    attributes = {name: value}
    attributes.update(defaults)
    attributes.update(attribute_pairs(attrs))
    # The resolved path always wins over a caller-supplied one
    attributes[name] = value
    return render_attributes(attributes)


def script_tag(src: str, *attrs: str) -> Markup:
    """Render ``<script ...></script>`` for an already resolved path.

    Example::

        script_tag("/app.js?v=1a2b", "type", "module", "defer", "")
        # <script src="/app.js?v=1a2b" type="module" defer></script>
    """
    attributes = _build(("src", src), {}, attrs)
    return Markup(f"<script {attributes}></script>")


def link_tag(href: str, *attrs: str) -> Markup:
    """Render a stylesheet ``<link .../>`` for an already resolved path.

    ``rel="stylesheet"`` is added unless the caller passes its own ``rel``.
    """
    attributes = _build(("href", href), {"rel": "stylesheet"}, attrs)
    return Markup(f"<link {attributes}/>")
