"""Build a single-page HTML User's Guide from features, a man page and a help reference."""

from .extract import extract_between
from .features import FeatureDescription, FeatureRegistry
from .formatter import ExternalFormatter, format_diagnostic
from .guide import (
    GuideContent,
    GuideOverrides,
    TemplateRenderError,
    assemble_content,
    print_user_guide,
    render_user_guide,
)
from .plaintext import render_plain_text

__all__ = [
    "ExternalFormatter",
    "FeatureDescription",
    "FeatureRegistry",
    "GuideContent",
    "GuideOverrides",
    "TemplateRenderError",
    "assemble_content",
    "extract_between",
    "format_diagnostic",
    "print_user_guide",
    "render_plain_text",
    "render_user_guide",
]
