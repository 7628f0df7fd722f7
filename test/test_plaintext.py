from __future__ import annotations

from docguide.plaintext import render_plain_text


def test_render_plain_text_returns_written_content() -> None:
    assert render_plain_text(lambda stream: stream.write("*tool.txt*\thelp\n")) == "*tool.txt*\thelp\n"


def test_render_plain_text_keeps_partial_output_on_failure() -> None:
    def writer(stream) -> None:
        stream.write("first line\n")
        raise ValueError("broken help generator")

    assert render_plain_text(writer) == "first line\n"


def test_render_plain_text_failure_before_writing_returns_empty() -> None:
    def writer(stream) -> None:
        raise KeyError("missing")

    assert render_plain_text(writer) == ""
