"""Render manifest templates with template data.

Templates are compiled once into read-only tables when their module is
imported. A template that references data which does not exist is a defect in
the package itself, so rendering failures are raised as `TemplateRenderError`
rather than a recoverable error.
"""

from collections.abc import Mapping
import dataclasses
import logging
from types import MappingProxyType
from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, Template, TemplateError

from install_assets.exceptions import TemplateRenderError

__all__ = ["compile_templates", "render_template"]

_LOGGER = logging.getLogger(__name__)


def compile_templates(sources: Mapping[str, str]) -> Mapping[str, Template]:
    """Compile template sources keyed by name into a read-only table."""
    env = Environment(
        loader=DictLoader(dict(sources)),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    templates: dict[str, Template] = {}
    for name in sources:
        try:
            templates[name] = env.get_template(name)
        except TemplateError as err:
            raise TemplateRenderError(name, err) from err
    return MappingProxyType(templates)


def render_template(template: Template, data: Any) -> bytes:
    """Render the template with the fields of the template data dataclass."""
    values = dataclasses.asdict(data)
    try:
        content = template.render(values)
    except (TemplateError, TypeError) as err:
        raise TemplateRenderError(template.name, err) from err
    _LOGGER.debug("Rendered template %s (%d bytes)", template.name, len(content))
    return content.encode()
