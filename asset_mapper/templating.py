"""Jinja2 integration for asset_mapper."""
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from asset_mapper.mapper import AssetMapper


def asset_globals(mapper: AssetMapper) -> dict[str, Any]:
    """Return the template callables backed by a mapper.

    Args:
        mapper: Populated asset mapper

    Returns:
        Mapping of template global name to callable
    """
    return {
        "asset": mapper.get,
        "script_tag": mapper.script_tag,
        "link_tag": mapper.link_tag,
        "entry_css": mapper.entry_stylesheets,
        "entry_js": mapper.entry_scripts,
        "entry_css_links": mapper.css_link_tags_from_entry,
        "entry_js_scripts": mapper.js_script_tags_from_entry,
    }


def register_asset_globals(env: Environment, mapper: AssetMapper) -> Environment:
    """Install the asset helpers as globals of a Jinja2 environment.

    Works with ``fastapi.templating.Jinja2Templates`` through its ``env``
    attribute.
    """
    env.globals.update(asset_globals(mapper))
    return env


class TemplateEngine:
    """Jinja2-based HTML template engine with asset helpers."""

    def __init__(self, templates_path: str, mapper: AssetMapper):
        """Initialize template engine.

        Args:
            templates_path: Path to templates directory
            mapper: Asset mapper exposed to templates
        """
        self.templates_path = Path(templates_path)
        self.mapper = mapper

        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            autoescape=select_autoescape(),
        )
        register_asset_globals(self.env, mapper)

    def render(self, template_name: str, context: dict[str, Any] | None = None) -> str:
        """Render a template with context.

        Args:
            template_name: Template filename relative to the templates directory
            context: Template context variables

        Returns:
            Rendered HTML
        """
        template = self.env.get_template(template_name)
        return template.render(**(context or {}))
