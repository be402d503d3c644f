"""Tests for rendering manifest templates."""

from dataclasses import dataclass

import pytest

from install_assets.exceptions import AssetDefect, TemplateRenderError
from install_assets.manifests.template import compile_templates, render_template


@dataclass(frozen=True)
class Data:
    name: str
    hosts: tuple[str, ...]


def test_render_template() -> None:
    """Test rendering a template with the fields of the data."""
    templates = compile_templates(
        {
            "hosts.yaml": (
                "name: {{ name }}\n"
                "hosts:\n"
                "{% for host in hosts %}\n"
                "- {{ host }}\n"
                "{% endfor %}\n"
            )
        }
    )
    content = render_template(templates["hosts.yaml"], Data(name="x", hosts=("a", "b")))
    assert content == b"name: x\nhosts:\n- a\n- b\n"


def test_templates_read_only() -> None:
    """Test the compiled template table cannot be modified."""
    templates = compile_templates({"a.yaml": "a: 1\n"})
    with pytest.raises(TypeError):
        templates["b.yaml"] = templates["a.yaml"]  # type: ignore[index]


def test_render_undefined_field() -> None:
    """Test a template referencing a missing field is a defect."""
    templates = compile_templates({"bad.yaml": "value: {{ missing }}\n"})
    with pytest.raises(TemplateRenderError, match="bad.yaml") as exc_info:
        render_template(templates["bad.yaml"], Data(name="x", hosts=()))
    assert isinstance(exc_info.value, AssetDefect)
    assert exc_info.value.fatal
    assert exc_info.value.template_name == "bad.yaml"


def test_render_mistyped_field() -> None:
    """Test a template using a field with the wrong type is a defect."""
    templates = compile_templates({"bad.yaml": "{{ name.missing.attr }}\n"})
    with pytest.raises(TemplateRenderError):
        render_template(templates["bad.yaml"], Data(name="x", hosts=()))


def test_compile_invalid_template() -> None:
    """Test a template with invalid syntax is a defect."""
    with pytest.raises(TemplateRenderError, match="broken.yaml"):
        compile_templates({"broken.yaml": "{% for %}"})
