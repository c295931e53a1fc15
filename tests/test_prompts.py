from chromatype.models.schemas import ColorTemplate, FontTemplate
from chromatype.services.prompts import (
    EMPTY_TEXT_SENTINEL,
    NO_TEXT_BLOCK,
    OCR_PROMPT,
    build_edit_prompt,
    build_text_instructions,
)

POSTER_COLORS = ColorTemplate(
    id="poster",
    name="Poster",
    description="Red and black",
    colors=("#FF0000", "#000000"),
    edit_prompt="screen printed gig poster",
)

POSTER_FONT = FontTemplate(
    id="condensed",
    name="Condensed",
    description="Tall and tight",
    font_family="font-sans",
    text_style_prompt="bold condensed sans",
)


def test_ocr_prompt_asks_for_sentinel():
    assert '"EMPTY"' in OCR_PROMPT
    assert "Preserve line breaks" in OCR_PROMPT


def test_empty_sentinel_selects_no_text_block():
    assert build_text_instructions(EMPTY_TEXT_SENTINEL, POSTER_FONT) == NO_TEXT_BLOCK

    prompt = build_edit_prompt(POSTER_COLORS, POSTER_FONT, EMPTY_TEXT_SENTINEL)
    assert "[NO TEXT DETECTED]" in prompt
    assert "[MANDATORY TEXT CONTENT]" not in prompt


def test_detected_text_embedded_verbatim():
    text = 'Café {brace} "quoted"\nsecond line  '
    block = build_text_instructions(text, POSTER_FONT)

    assert block.startswith("[MANDATORY TEXT CONTENT]")
    assert block.count(text) == 2
    assert 'Apply the "bold condensed sans" typography style' in block


def test_sale_poster_prompt_contains_text_palette_and_style():
    prompt = build_edit_prompt(POSTER_COLORS, POSTER_FONT, "SALE 50% OFF")

    assert "SALE 50% OFF" in prompt
    assert "#FF0000, #000000" in prompt
    assert "bold condensed sans" in prompt
    assert "screen printed gig poster" in prompt


def test_blocks_appear_in_fixed_order():
    prompt = build_edit_prompt(POSTER_COLORS, POSTER_FONT, "HELLO")

    markers = [
        "ACTION:",
        "[VISUAL STYLE]",
        "[MANDATORY TEXT CONTENT]",
        "[COMPOSITION]",
        "[STRICT PROHIBITIONS]",
        "OUTPUT:",
    ]
    positions = [prompt.index(marker) for marker in markers]
    assert positions == sorted(positions)
