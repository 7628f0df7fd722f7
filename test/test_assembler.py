from __future__ import annotations

import sys

from docguide.features import FeatureDescription
from docguide.formatter import ExternalFormatter
from docguide.guide.assembler import assemble_content
from docguide.guide.types import GuideOverrides


class RecordingFormatter:
    def __init__(self, output: str) -> None:
        self.output = output
        self.calls = 0

    def convert(self, document) -> str:
        self.calls += 1
        return self.output


def _man_page(stream) -> None:
    stream.write(".TH TOOL 1\n")


def _help_text(stream) -> None:
    stream.write("*tool.txt*\tTool\n")


def _fail(stream) -> None:
    raise AssertionError("generator should not run")


def test_man_page_override_skips_formatter() -> None:
    formatter = RecordingFormatter("<body>generated</body>")

    content = assemble_content(
        "Tool",
        [],
        GuideOverrides(man_page_html="X"),
        man_page=_fail,
        help_text=_help_text,
        formatter=formatter,
    )

    assert content.man_page_html == "X"
    assert formatter.calls == 0


def test_vimdoc_override_skips_help_generator() -> None:
    formatter = RecordingFormatter("<html><body>man</body></html>")

    content = assemble_content(
        "Tool",
        [],
        GuideOverrides(vimdoc_html="<pre>given</pre>"),
        man_page=_man_page,
        help_text=_fail,
        formatter=formatter,
    )

    assert content.vimdoc_html == "<pre>given</pre>"
    assert content.man_page_html == "man"
    assert formatter.calls == 1


def test_generated_fragments_are_extracted_and_wrapped() -> None:
    formatter = RecordingFormatter("<html><head></head><body>\n<h1>TOOL</h1>\n</body></html>")

    content = assemble_content(
        "Tool",
        [],
        man_page=_man_page,
        help_text=_help_text,
        formatter=formatter,
    )

    assert content.man_page_html == "\n<h1>TOOL</h1>\n"
    assert content.vimdoc_html == "<pre>\n*tool.txt*\tTool\n\n</pre>"


def test_working_subprocess_formatter_produces_non_empty_fragments() -> None:
    code = (
        "import sys; body = sys.stdin.read(); "
        "sys.stdout.write('<html><body><pre>' + body + '</pre></body></html>')"
    )
    formatter = ExternalFormatter([sys.executable, "-c", code])

    content = assemble_content(
        "Tool",
        [],
        man_page=_man_page,
        help_text=_help_text,
        formatter=formatter,
    )

    assert content.man_page_html == "<pre>.TH TOOL 1\n</pre>"
    assert "*tool.txt*" in content.vimdoc_html


def test_missing_formatter_degrades_to_diagnostic() -> None:
    formatter = ExternalFormatter(["docguide-no-such-formatter-binary"])

    content = assemble_content(
        "Tool",
        [],
        man_page=_man_page,
        help_text=_help_text,
        formatter=formatter,
    )

    assert content.man_page_html.startswith("[ERROR]")


def test_failing_help_generator_yields_empty_preformatted_block() -> None:
    def broken(stream) -> None:
        raise RuntimeError("no help today")

    content = assemble_content(
        "Tool",
        [],
        man_page=_man_page,
        help_text=broken,
        formatter=RecordingFormatter("<body>m</body>"),
    )

    assert content.vimdoc_html == "<pre>\n\n</pre>"


def test_formatter_output_without_body_yields_empty_man_page() -> None:
    content = assemble_content(
        "Tool",
        [],
        man_page=_man_page,
        help_text=_help_text,
        formatter=RecordingFormatter("no markup at all"),
    )

    assert content.man_page_html == ""


def test_features_keep_registry_order() -> None:
    features = [
        FeatureDescription("rename", "Rename", "<p>r</p>"),
        FeatureDescription("extract", "Extract Function", "<p>e</p>"),
    ]

    content = assemble_content(
        "Tool",
        iter(features),
        GuideOverrides(man_page_html="m", vimdoc_html="v"),
        man_page=_fail,
        help_text=_fail,
        formatter=RecordingFormatter(""),
    )

    assert content.about_text == "Tool"
    assert content.features == tuple(features)
