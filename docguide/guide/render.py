from __future__ import annotations

import argparse
import logging
from functools import partial
from typing import Iterable, Optional, TextIO

from jinja2 import Environment, StrictUndefined, TemplateError

from ..config import GuideConfig
from ..features import FeatureDescription, iter_features
from ..features import builtin as _builtin_features  # noqa: F401
from ..formatter import ExternalFormatter
from ..manpage import write_man_page
from ..vimdoc import write_vimdoc
from .assembler import assemble_content
from .template import USER_GUIDE_TEMPLATE
from .types import GuideContent, GuideOverrides, TemplateRenderError

logger = logging.getLogger(__name__)

_environment = Environment(
    undefined=StrictUndefined,
    autoescape=False,
    keep_trailing_newline=True,
)


def render_user_guide(
    content: GuideContent,
    sink: TextIO,
    *,
    template_source: str = USER_GUIDE_TEMPLATE,
) -> None:
    """Bind ``content`` into the guide template and write the page to ``sink``.

    The page is rendered completely before anything is written, so a binding
    failure leaves the sink untouched and raises :class:`TemplateRenderError`.
    """

    try:
        template = _environment.from_string(template_source)
        html = template.render(
            about_text=content.about_text,
            features=content.features,
            man_page_html=content.man_page_html,
            vimdoc_html=content.vimdoc_html,
        )
    except (TemplateError, TypeError, AttributeError) as exc:
        raise TemplateRenderError(f"Could not render the User's Guide: {exc}") from exc

    sink.write(html)


def build_user_guide(
    about_text: str,
    parser: argparse.ArgumentParser,
    *,
    features: Optional[Iterable[FeatureDescription]] = None,
    overrides: Optional[GuideOverrides] = None,
    config: Optional[GuideConfig] = None,
) -> GuideContent:
    """Assemble guide content for the program described by ``parser``."""

    features = tuple(iter_features() if features is None else features)
    formatter = ExternalFormatter.from_config(config or GuideConfig())
    logger.debug("Assembling guide for %s with %d feature(s)", about_text, len(features))
    return assemble_content(
        about_text,
        features,
        overrides,
        man_page=partial(write_man_page, about_text, parser, features),
        help_text=partial(write_vimdoc, about_text, parser, features),
        formatter=formatter,
    )


def print_user_guide(
    about_text: str,
    parser: argparse.ArgumentParser,
    out: TextIO,
    *,
    features: Optional[Iterable[FeatureDescription]] = None,
    overrides: Optional[GuideOverrides] = None,
    config: Optional[GuideConfig] = None,
) -> None:
    """Write the HTML User's Guide to ``out``.

    The man page is piped through the configured formatter and the help
    reference is embedded as preformatted text, unless ``overrides`` already
    supplies either fragment.
    """

    content = build_user_guide(
        about_text,
        parser,
        features=features,
        overrides=overrides,
        config=config,
    )
    render_user_guide(content, out)


__all__ = ["build_user_guide", "print_user_guide", "render_user_guide"]
