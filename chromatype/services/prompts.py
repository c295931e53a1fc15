from chromatype.models.schemas import ColorTemplate, FontTemplate

EMPTY_TEXT_SENTINEL = "EMPTY"

OCR_PROMPT = """Analyze this image and extract all visible text.

Guidelines:
1. Transcribe the text EXACTLY as it appears.
2. Do not autocorrect creative spelling unless it is clearly an OCR error.
3. Preserve line breaks.
4. If the text is stylized, focus on the characters.

Output strictly just the text content. If no text is found, return "EMPTY"."""

MANDATORY_TEXT_BLOCK = """[MANDATORY TEXT CONTENT]
The original image contains the following text which MUST be preserved:
"{detected_text}"

TYPOGRAPHY INSTRUCTIONS:
1. RENDER EXACTLY: You must write "{detected_text}" in the image.
2. SPELLING CHECK: Do not change the spelling.
3. FONT STYLE: Apply the "{text_style}" typography style.
4. PLACEMENT: Place the text prominently where it fits the composition best, similar to the original layout if possible.
5. LEGIBILITY: Ensure high contrast between text and background."""

NO_TEXT_BLOCK = """[NO TEXT DETECTED]
The input appears to have no text. Do not generate any text. Focus on the visual art style."""

EDIT_PROMPT = """ACTION: Redraw the image completely in the target style.

[VISUAL STYLE]
1. ART DIRECTION: {art_direction}
2. COLOR PALETTE: You MUST use these colors primarily: {palette}.
3. TRANSFORMATION: Replace all original textures. The image should look like it was created from scratch in the new style.

{text_instructions}

[COMPOSITION]
1. Keep the main subject centered or in its original composition.
2. Ensure text is NOT covered by objects.
3. Make text HIGHLY READABLE against the background.

[STRICT PROHIBITIONS]
1. Do NOT add any extra words, captions, or watermarks.
2. Do NOT remove the existing text listed above.
3. Do NOT distort the text characters beyond recognition.

OUTPUT: A fully stylized image."""


def has_detected_text(detected_text: str) -> bool:
    return detected_text != EMPTY_TEXT_SENTINEL


def build_text_instructions(detected_text: str, font_template: FontTemplate) -> str:
    """Pick the typography block: mandatory text when OCR found any, otherwise no-text."""
    if not has_detected_text(detected_text):
        return NO_TEXT_BLOCK

    # substituted values are not re-parsed by format(), so the text stays byte-for-byte
    return MANDATORY_TEXT_BLOCK.format(
        detected_text=detected_text,
        text_style=font_template.text_style_prompt,
    )


def build_edit_prompt(
    color_template: ColorTemplate,
    font_template: FontTemplate,
    detected_text: str,
) -> str:
    """
    Assemble the full instruction sent to the image model.

    Block order is fixed: action, visual style, typography, composition,
    prohibitions, output.
    """
    return EDIT_PROMPT.format(
        art_direction=color_template.edit_prompt,
        palette=", ".join(color_template.colors),
        text_instructions=build_text_instructions(detected_text, font_template),
    )
