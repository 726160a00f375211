"""
Resume text cleanup for the Intake context.

LLM responses often wrap the resume in a markdown code fence or leak HTML
entities. These are removed before the text reaches the parser.
"""

import re

# ```text, ```markdown and bare ``` fence markers
CODE_FENCE_PATTERN = r"```(?:text|markdown)?"

# &nbsp; is replaced by a space, other named entities are dropped
NBSP_PATTERN = r"&nbsp;"
HTML_ENTITY_PATTERN = r"&[a-z]+;"

# Bullet glyphs produced by PDF text extraction, normalized to "• "
EXTRACTED_BULLET_PATTERN = r"^[ \t]*[•∙⋅◦○●][ \t]*"


def clean_resume_text(text: str) -> str:
    """
    Remove code fences and HTML entities from resume text.

    Args:
        text: Raw resume text (typically an LLM response)

    Returns:
        Cleaned, trimmed text

    Example:
        >>> clean_resume_text("```markdown\\nJANE&nbsp;DOE\\n```")
        'JANE DOE'
    """
    text = re.sub(CODE_FENCE_PATTERN, "", text)
    text = re.sub(NBSP_PATTERN, " ", text, flags=re.IGNORECASE)
    text = re.sub(HTML_ENTITY_PATTERN, "", text, flags=re.IGNORECASE)
    return text.strip()


def normalize_bullets(text: str) -> str:
    """Rewrite extracted bullet glyphs (∙ ⋅ ◦ ○ ● •) at line starts as '• '."""
    return re.sub(EXTRACTED_BULLET_PATTERN, "• ", text, flags=re.MULTILINE)
