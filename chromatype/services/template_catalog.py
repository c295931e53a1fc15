from chromatype.models.schemas import ColorTemplate, FontTemplate
from chromatype.services.errors import TemplateNotFoundError

COLOR_TEMPLATES: tuple[ColorTemplate, ...] = (
    ColorTemplate(
        id="neon-noir",
        name="Neon Noir",
        description="Deep shadows cut by electric magenta and cyan light.",
        colors=("#0D0221", "#FF2A6D", "#05D9E8", "#D1F7FF"),
        edit_prompt=(
            "Cyberpunk night scene lighting with glowing neon rim lights, "
            "deep black shadows and wet reflective surfaces."
        ),
    ),
    ColorTemplate(
        id="sunset-risograph",
        name="Sunset Risograph",
        description="Warm two-tone print with grainy ink overlap.",
        colors=("#FF6B35", "#F7C59F", "#004E89", "#FFFFFF"),
        edit_prompt=(
            "Risograph print look with flat ink layers, visible grain, slight "
            "misregistration and a warm sunset mood."
        ),
    ),
    ColorTemplate(
        id="nordic-mist",
        name="Nordic Mist",
        description="Muted, airy pastels with soft diffused light.",
        colors=("#E8EEF2", "#A9BCC9", "#5C7285", "#2E3A44"),
        edit_prompt=(
            "Minimal Scandinavian photography with soft overcast light, low "
            "contrast and desaturated cool tones."
        ),
    ),
    ColorTemplate(
        id="pop-halftone",
        name="Pop Halftone",
        description="Bold primaries with comic-book halftone dots.",
        colors=("#FFE000", "#FF0000", "#0047AB", "#000000"),
        edit_prompt=(
            "Pop art comic illustration with thick black outlines, halftone "
            "dot shading and saturated primary colors."
        ),
    ),
    ColorTemplate(
        id="vintage-film",
        name="Vintage Film",
        description="Faded seventies film stock with warm highlights.",
        colors=("#D9A066", "#8C5E3C", "#3B5249", "#F2E3C6"),
        edit_prompt=(
            "1970s analog film photograph with faded blacks, warm amber "
            "highlights, gentle grain and soft vignetting."
        ),
    ),
)

FONT_TEMPLATES: tuple[FontTemplate, ...] = (
    FontTemplate(
        id="bold-sans",
        name="Bold Sans",
        description="Heavy geometric sans-serif for loud headlines.",
        font_family="font-sans font-black",
        text_style_prompt="bold condensed sans-serif, all caps, tight letter spacing",
    ),
    FontTemplate(
        id="elegant-serif",
        name="Elegant Serif",
        description="High-contrast editorial serif.",
        font_family="font-serif italic",
        text_style_prompt="elegant high-contrast serif, editorial magazine style",
    ),
    FontTemplate(
        id="hand-script",
        name="Hand Script",
        description="Flowing brush lettering.",
        font_family="font-script",
        text_style_prompt="hand-painted brush script with natural ink texture",
    ),
    FontTemplate(
        id="retro-display",
        name="Retro Display",
        description="Chunky seventies display type with drop shadow.",
        font_family="font-display",
        text_style_prompt="chunky retro 1970s display lettering with a solid drop shadow",
    ),
    FontTemplate(
        id="mono-terminal",
        name="Mono Terminal",
        description="Pixel-crisp monospace, like an old terminal.",
        font_family="font-mono",
        text_style_prompt="monospaced terminal typeface with a subtle phosphor glow",
    ),
)

_COLOR_BY_ID = {template.id: template for template in COLOR_TEMPLATES}
_FONT_BY_ID = {template.id: template for template in FONT_TEMPLATES}


def get_color_template(template_id: str) -> ColorTemplate:
    try:
        return _COLOR_BY_ID[template_id]
    except KeyError:
        raise TemplateNotFoundError(f"Unknown color template: {template_id}") from None


def get_font_template(template_id: str) -> FontTemplate:
    try:
        return _FONT_BY_ID[template_id]
    except KeyError:
        raise TemplateNotFoundError(f"Unknown font template: {template_id}") from None


def default_color_template() -> ColorTemplate:
    return COLOR_TEMPLATES[0]


def default_font_template() -> FontTemplate:
    return FONT_TEMPLATES[0]
