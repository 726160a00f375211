"""
Template style configuration.

A StyleConfig holds everything a template varies: page size, margins, fonts,
font sizes and weights per text role, colors, spacing and layout toggles.
Instances are immutable and built from the template catalog
(see template_registry.py); rendering code never mutates them.
"""

from dataclasses import dataclass, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

RGB = Tuple[float, float, float]

# US Letter, in points
LETTER_WIDTH = 612.0
LETTER_HEIGHT = 792.0

# Text roles every template must define a size, weight and color for
TEXT_ROLES = (
    "name",
    "tagline",
    "contact",
    "section_header",
    "entry_title",
    "job_title",
    "entry_date",
    "location",
    "detail",
    "body",
    "bullet",
)

# Colors used for rules and links, on top of the text roles
DECORATION_COLORS = ("header_rule", "section_rule", "link")

FONT_WEIGHTS = ("regular", "bold", "italic")


class ContactMode(str, Enum):
    """How header contact details are found."""

    LITERAL = "literal"  # lines containing '@', '|', linkedin, github
    REGEX = "regex"  # phone/email/linkedin/github/website patterns


class TitleDateLayout(str, Enum):
    """How job/project entry lines with dates are laid out."""

    PROBE = "probe"  # inspect the line after the title for a title/date pair
    INLINE = "inline"  # every '|' line is a left/right pair


@dataclass(frozen=True)
class Margins:
    top: float
    bottom: float
    left: float
    right: float


@dataclass(frozen=True)
class Spacing:
    """
    Vertical and horizontal spacing constants, in points.

    Attributes:
        after_name: Gap between name baseline and the next line
        after_contact: Gap between contact block and the header rule
        after_section_header: Gap between a section underline and its content
        between_sections: Gap after the header rule
        between_subsections: Gap after each job/project entry
        line_height: Advance per wrapped line
        bullet_line_height: Advance per wrapped bullet line
        paragraph_gap: Gap after bullet groups, text items and header blocks
        section_underline_offset: Drop from section title baseline to its underline
        underline_padding: Extra underline length beyond the section title width
        section_keep: Space a section header needs below it before a page break
        subsection_keep: Space an entry title needs below it before a page break
        bullet_indent: Glyph offset for bullets inside entries
        bullet_text_indent: Text offset for bullets inside entries
        group_text_indent: Text offset for bullets in standalone bullet groups
        nested_indent: Extra offset per nesting level of indented bullets
        fallback_reserve: Space the fallback renderer keeps before breaking a page
    """

    after_name: float
    after_contact: float
    after_section_header: float
    between_sections: float
    between_subsections: float
    line_height: float
    bullet_line_height: float
    paragraph_gap: float
    section_underline_offset: float
    underline_padding: float
    section_keep: float
    subsection_keep: float
    bullet_indent: float
    bullet_text_indent: float
    group_text_indent: float
    nested_indent: float
    fallback_reserve: float


@dataclass(frozen=True)
class TemplateToggles:
    contact_mode: ContactMode = ContactMode.LITERAL
    title_date_layout: TitleDateLayout = TitleDateLayout.PROBE
    highlight_links: bool = False
    full_width_section_rule: bool = False


@dataclass(frozen=True)
class StyleConfig:
    """
    Immutable style parameters for one template.

    Attributes:
        template_id: Catalog id (e.g., "classic")
        name: Display name
        description: One-line description for template pickers
        page_width: Page width in points
        page_height: Page height in points
        margins: Page margins
        fonts: Weight -> PDF font name (regular, bold, italic)
        sizes: Text role -> font size
        weights: Text role -> weight
        colors: Role -> RGB triplet in 0..1
        spacing: Spacing constants
        toggles: Layout toggles
        header_rule_thickness: Thickness of the rule under the header block
        section_rule_thickness: Thickness of section underlines
        bullet_glyph: Character drawn for bullets
        contact_separator: Separator between literal contact fragments
    """

    template_id: str
    name: str
    description: str
    page_width: float
    page_height: float
    margins: Margins
    fonts: Mapping[str, str]
    sizes: Mapping[str, float]
    weights: Mapping[str, str]
    colors: Mapping[str, RGB]
    spacing: Spacing
    toggles: TemplateToggles
    header_rule_thickness: float = 1.0
    section_rule_thickness: float = 1.5
    bullet_glyph: str = "•"
    contact_separator: str = " • "

    @property
    def content_left(self) -> float:
        return self.margins.left

    @property
    def content_right(self) -> float:
        return self.page_width - self.margins.right

    @property
    def content_width(self) -> float:
        return self.page_width - self.margins.left - self.margins.right

    @property
    def top_y(self) -> float:
        return self.page_height - self.margins.top

    def font_for(self, role: str) -> str:
        """PDF font name for a text role."""
        return self.fonts[self.weights[role]]

    def size_for(self, role: str) -> float:
        return self.sizes[role]

    def color_for(self, role: str) -> RGB:
        return self.colors[role]

    @classmethod
    def from_dict(cls, template_id: str, config: Dict[str, Any]) -> "StyleConfig":
        """
        Build a StyleConfig from a merged catalog entry.

        Args:
            template_id: Catalog id
            config: Entry with page, margins, fonts, sizes, weights, colors,
                    spacing, toggles (and optional scalar fields)

        Returns:
            StyleConfig instance

        Raises:
            ValueError: If a required role, weight or spacing key is missing
        """
        missing_sizes = [role for role in TEXT_ROLES if role not in config["sizes"]]
        missing_weights = [role for role in TEXT_ROLES if role not in config["weights"]]
        missing_colors = [
            role for role in TEXT_ROLES + DECORATION_COLORS if role not in config["colors"]
        ]
        missing_fonts = [weight for weight in FONT_WEIGHTS if weight not in config["fonts"]]
        unknown_weights = sorted(
            {weight for weight in config["weights"].values() if weight not in FONT_WEIGHTS}
        )
        problems = {
            "sizes": missing_sizes,
            "weights": missing_weights,
            "colors": missing_colors,
            "fonts": missing_fonts,
            "unknown weights": unknown_weights,
        }
        problems = {key: value for key, value in problems.items() if value}
        if problems:
            raise ValueError(f"Template '{template_id}' is incomplete: {problems}")

        spacing_names = [f.name for f in fields(Spacing)]
        missing_spacing = [name for name in spacing_names if name not in config["spacing"]]
        if missing_spacing:
            raise ValueError(f"Template '{template_id}' is missing spacing: {missing_spacing}")

        toggles = config.get("toggles", {})
        page = config.get("page", {})

        scalars = {
            key: config[key]
            for key in (
                "header_rule_thickness",
                "section_rule_thickness",
                "bullet_glyph",
                "contact_separator",
            )
            if key in config
        }

        return cls(
            template_id=template_id,
            name=config.get("name", template_id.capitalize()),
            description=config.get("description", ""),
            page_width=float(page.get("width", LETTER_WIDTH)),
            page_height=float(page.get("height", LETTER_HEIGHT)),
            margins=Margins(**{k: float(v) for k, v in config["margins"].items()}),
            fonts=MappingProxyType(dict(config["fonts"])),
            sizes=MappingProxyType({k: float(v) for k, v in config["sizes"].items()}),
            weights=MappingProxyType(dict(config["weights"])),
            colors=MappingProxyType(
                {k: tuple(float(c) for c in v) for k, v in config["colors"].items()}
            ),
            spacing=Spacing(**{name: float(config["spacing"][name]) for name in spacing_names}),
            toggles=TemplateToggles(
                contact_mode=ContactMode(toggles.get("contact_mode", "literal")),
                title_date_layout=TitleDateLayout(toggles.get("title_date_layout", "probe")),
                highlight_links=bool(toggles.get("highlight_links", False)),
                full_width_section_rule=bool(toggles.get("full_width_section_rule", False)),
            ),
            **scalars,
        )
