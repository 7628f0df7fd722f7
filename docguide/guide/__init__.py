from .assembler import assemble_content
from .render import build_user_guide, print_user_guide, render_user_guide
from .types import GuideContent, GuideOverrides, TemplateRenderError

__all__ = [
    "GuideContent",
    "GuideOverrides",
    "TemplateRenderError",
    "assemble_content",
    "build_user_guide",
    "print_user_guide",
    "render_user_guide",
]
