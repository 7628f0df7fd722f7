from __future__ import annotations

import html
import re
from dataclasses import dataclass
from typing import List

from ..guide.types import GuideContent

_TAG_RE = re.compile(r"<[^>]*>")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


@dataclass(frozen=True)
class PreviewSection:
    title: str
    text: str


def html_to_text(fragment: str) -> str:
    """Strip tags and decode entities so a fragment reads as plain text."""

    text = html.unescape(_TAG_RE.sub("", fragment))
    lines = [line.rstrip() for line in text.splitlines()]
    return _BLANK_RUN_RE.sub("\n\n", "\n".join(lines)).strip("\n")


def build_preview_sections(content: GuideContent) -> List[PreviewSection]:
    sections = [
        PreviewSection(title=feature.name, text=html_to_text(feature.html_body))
        for feature in content.features
    ]
    sections.append(PreviewSection(title="Man Page", text=html_to_text(content.man_page_html)))
    sections.append(PreviewSection(title="Help Reference", text=html_to_text(content.vimdoc_html)))
    return sections


__all__ = ["PreviewSection", "build_preview_sections", "html_to_text"]
