from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional, Protocol, TextIO

from ..extract import extract_between
from ..features import FeatureDescription
from ..formatter import DIAGNOSTIC_PREFIX, Document
from ..plaintext import render_plain_text
from .types import GuideContent, GuideOverrides

logger = logging.getLogger(__name__)

BODY_START = "<body>"
BODY_END = "</body>"


class Formatter(Protocol):
    def convert(self, document: Document) -> str:
        ...


def wrap_preformatted(text: str) -> str:
    return f"<pre>\n{text}\n</pre>"


def assemble_content(
    about_text: str,
    features: Iterable[FeatureDescription],
    overrides: Optional[GuideOverrides] = None,
    *,
    man_page: Callable[[TextIO], None],
    help_text: Callable[[TextIO], None],
    formatter: Formatter,
) -> GuideContent:
    """Merge features, the converted man page and the help reference.

    Fragments present in ``overrides`` are used as given and their generation
    step is skipped.  Failures while generating degrade to diagnostic or empty
    text; this function does not raise for them.
    """

    overrides = overrides or GuideOverrides()

    man_page_html = overrides.man_page_html
    if not man_page_html:
        converted = formatter.convert(man_page)
        man_page_html = extract_between(converted, BODY_START, BODY_END)
        if not man_page_html:
            # Diagnostics carry no <body>; show them rather than an empty section.
            man_page_html = converted if converted.startswith(DIAGNOSTIC_PREFIX) else ""
    else:
        logger.debug("Using supplied man page HTML")

    vimdoc_html = overrides.vimdoc_html
    if not vimdoc_html:
        vimdoc_html = wrap_preformatted(render_plain_text(help_text))
    else:
        logger.debug("Using supplied help reference HTML")

    return GuideContent(
        about_text=about_text,
        features=tuple(features),
        man_page_html=man_page_html,
        vimdoc_html=vimdoc_html,
    )


__all__ = ["BODY_END", "BODY_START", "Formatter", "assemble_content", "wrap_preformatted"]
