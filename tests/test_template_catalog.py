import re

import pytest
from pydantic import ValidationError

from chromatype.services.errors import TemplateNotFoundError
from chromatype.services.template_catalog import (
    COLOR_TEMPLATES,
    FONT_TEMPLATES,
    default_color_template,
    default_font_template,
    get_color_template,
    get_font_template,
)

HEX_COLOR = re.compile(r"^#[0-9A-F]{6}$")


def test_catalog_ids_are_unique():
    assert len({t.id for t in COLOR_TEMPLATES}) == len(COLOR_TEMPLATES)
    assert len({t.id for t in FONT_TEMPLATES}) == len(FONT_TEMPLATES)


def test_colors_are_hex():
    for template in COLOR_TEMPLATES:
        assert template.colors
        assert all(HEX_COLOR.match(color) for color in template.colors)


def test_lookup_by_id():
    assert get_color_template("vintage-film").name == "Vintage Film"
    assert get_font_template("mono-terminal").name == "Mono Terminal"


def test_unknown_ids_raise():
    with pytest.raises(TemplateNotFoundError):
        get_color_template("missing")
    with pytest.raises(TemplateNotFoundError):
        get_font_template("missing")


def test_defaults_are_first_entries():
    assert default_color_template() is COLOR_TEMPLATES[0]
    assert default_font_template() is FONT_TEMPLATES[0]


def test_templates_are_immutable():
    with pytest.raises(ValidationError):
        COLOR_TEMPLATES[0].edit_prompt = "something else"
