"""Build the bootkube manifests from the template data."""

from collections.abc import Mapping
import logging
from types import MappingProxyType

from jinja2 import Template

from install_assets.asset.file import AssetFile
from install_assets.exceptions import AssetDefect

from .content import bootkube as content
from .template import compile_templates, render_template
from .template_data import BootkubeTemplateData

__all__ = [
    "MANIFEST_DIR",
    "BOOTKUBE_TEMPLATES",
    "BOOTKUBE_STATIC",
    "build_bootkube_files",
    "manifest_path",
]

_LOGGER = logging.getLogger(__name__)

MANIFEST_DIR = "manifests"

BOOTKUBE_TEMPLATES: Mapping[str, Template] = compile_templates(content.TEMPLATES)
BOOTKUBE_STATIC: Mapping[str, bytes] = MappingProxyType(
    {name: text.encode() for name, text in content.STATIC.items()}
)


def manifest_path(name: str) -> str:
    """Return the path of a manifest file relative to the asset directory."""
    return f"{MANIFEST_DIR}/{name}"


def build_bootkube_files(
    data: BootkubeTemplateData,
    templates: Mapping[str, Template] = BOOTKUBE_TEMPLATES,
    static: Mapping[str, bytes] = BOOTKUBE_STATIC,
) -> list[AssetFile]:
    """Render every bootkube template and include the static manifests.

    Files are ordered by name so the output does not depend on table order.
    """
    if overlap := set(templates) & set(static):
        raise AssetDefect(f"Manifest names are both templated and static: {overlap}")
    rendered: dict[str, bytes] = {
        name: render_template(template, data) for name, template in templates.items()
    }
    rendered.update(static)
    _LOGGER.debug(
        "Built %d templated and %d static manifests", len(templates), len(static)
    )
    return [
        AssetFile(filename=manifest_path(name), data=rendered[name])
        for name in sorted(rendered)
    ]
