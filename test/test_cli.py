from __future__ import annotations

import json
import shlex
import sys
from pathlib import Path

from docguide.cli import build_parser, main

FAKE_GROFF = "import sys; sys.stdin.read(); sys.stdout.write('<html><body><p>converted man page</p></body></html>')"


def _formatter_arg() -> str:
    return f"{shlex.quote(sys.executable)} -c {shlex.quote(FAKE_GROFF)}"


def test_parser_registers_commands() -> None:
    parser = build_parser()
    for command in ("guide", "man", "vimdoc", "preview"):
        args = parser.parse_args([command])
        assert args.command == command


def test_man_command_prints_troff(capsys) -> None:
    exit_code = main(["man", "-a", "Tool"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.startswith('.TH "DOCGUIDE" 1')
    assert ".SH COMMANDS" in out
    assert ".B guide" in out


def test_vimdoc_command_prints_help_reference(capsys) -> None:
    exit_code = main(["vimdoc", "-a", "Tool"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.startswith("*docguide.txt*\tTool")
    assert "*docguide-feature-preview*" in out


def test_guide_command_writes_output_file(tmp_path: Path, capsys) -> None:
    output = tmp_path / "out" / "guide.html"

    exit_code = main(["guide", "-a", "Tool", "--formatter", _formatter_arg(), "-o", str(output)])

    assert exit_code == 0
    document = output.read_text(encoding="utf-8")
    assert document.count("Tool User's Guide") == 2
    assert "<p>converted man page</p>" in document
    assert '<a name="feature-guide"></a>' in document
    assert "Wrote guide to" in capsys.readouterr().out


def test_guide_command_uses_manifest_and_overrides(tmp_path: Path, capsys) -> None:
    manifest = tmp_path / "features.json"
    manifest.write_text(
        json.dumps(
            {
                "features": [
                    {"key": "rename", "name": "Rename", "html": "<p>Rename body</p>"},
                    {"key": "extract", "name": "Extract", "html": "<p>Extract body</p>"},
                ]
            }
        ),
        encoding="utf-8",
    )
    man_html = tmp_path / "man.html"
    man_html.write_text("<p>cached man page</p>", encoding="utf-8")
    vim_html = tmp_path / "vim.html"
    vim_html.write_text("<pre>cached help</pre>", encoding="utf-8")

    exit_code = main(
        [
            "guide",
            "-a",
            "Refactor",
            "-f",
            str(manifest),
            "--man-page-html",
            str(man_html),
            "--vimdoc-html",
            str(vim_html),
            "--formatter",
            "docguide-no-such-formatter-binary",
        ]
    )

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.index("<p>Rename body</p>") < out.index("<p>Extract body</p>")
    assert "<p>cached man page</p>" in out
    assert "<pre>cached help</pre>" in out
    assert "[ERROR]" not in out
    assert 'name="feature-guide"' not in out


def test_guide_command_reports_missing_manifest(tmp_path: Path, capsys) -> None:
    exit_code = main(["guide", "-f", str(tmp_path / "absent.json")])

    assert exit_code == 1
    assert "Feature manifest not found" in capsys.readouterr().err


def test_guide_command_reports_missing_override(tmp_path: Path, capsys) -> None:
    exit_code = main(["guide", "--man-page-html", str(tmp_path / "absent.html")])

    assert exit_code == 1
    assert "HTML fragment not found" in capsys.readouterr().err


def test_guide_command_reports_unwritable_output(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "not-a-directory"
    blocker.write_text("", encoding="utf-8")

    exit_code = main(
        ["guide", "--formatter", _formatter_arg(), "-o", str(blocker / "guide.html")]
    )

    assert exit_code == 1
    assert "Could not write" in capsys.readouterr().err


def test_preview_requires_terminal(capsys) -> None:
    exit_code = main(["preview"])

    assert exit_code == 1
    assert "interactive terminal" in capsys.readouterr().err
