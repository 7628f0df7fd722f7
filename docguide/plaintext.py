from __future__ import annotations

import io
import logging
from typing import Callable, TextIO

logger = logging.getLogger(__name__)


def render_plain_text(writer: Callable[[TextIO], None]) -> str:
    """Run a help-text writer into a buffer and return what it produced.

    A failing writer must not stop the guide from being built, so any
    exception is logged and the partial buffer is returned instead.
    """

    buffer = io.StringIO()
    try:
        writer(buffer)
    except Exception:
        logger.debug("Help text generation failed; keeping partial output", exc_info=True)
    return buffer.getvalue()


__all__ = ["render_plain_text"]
