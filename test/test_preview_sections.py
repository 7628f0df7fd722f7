from __future__ import annotations

from docguide.features import FeatureDescription
from docguide.guide import GuideContent
from docguide.tui import build_preview_sections, html_to_text


def test_html_to_text_strips_tags_and_entities() -> None:
    assert html_to_text("<p>a &amp; <tt>b</tt></p>\n\n\n\n<p>c</p>") == "a & b\n\nc"


def test_preview_sections_follow_guide_order() -> None:
    content = GuideContent(
        about_text="Tool",
        features=(
            FeatureDescription("rename", "Rename", "<p>Renames things.</p>"),
            FeatureDescription("extract", "Extract", "<p>Extracts things.</p>"),
        ),
        man_page_html="<h2>NAME</h2>\n<p>tool</p>",
        vimdoc_html="<pre>\n*tool.txt*\n</pre>",
    )

    sections = build_preview_sections(content)

    assert [section.title for section in sections] == ["Rename", "Extract", "Man Page", "Help Reference"]
    assert sections[0].text == "Renames things."
    assert sections[2].text == "NAME\ntool"
    assert sections[3].text == "*tool.txt*"
