from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from ..features import FeatureDescription


@dataclass(frozen=True)
class GuideOverrides:
    """Pre-rendered fragments that replace the corresponding generation step.

    An empty string means "generate it".  A non-empty value is used verbatim;
    keeping it fresh is up to the caller.
    """

    man_page_html: str = ""
    vimdoc_html: str = ""


@dataclass(frozen=True)
class GuideContent:
    """Everything the User's Guide template needs."""

    about_text: str
    features: Tuple[FeatureDescription, ...] = field(default_factory=tuple)
    man_page_html: str = ""
    vimdoc_html: str = ""


class TemplateRenderError(RuntimeError):
    """Raised when the guide template cannot be bound to its content."""
