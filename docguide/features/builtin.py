"""Descriptions of docguide's own commands, used when no manifest is given."""

from __future__ import annotations

from . import FeatureDescription, register_feature

GUIDE = register_feature(
    FeatureDescription(
        key="guide",
        name="Build the User's Guide",
        html_body="""<p>Combines the registered features, the man page and the help
  reference into one self-contained HTML page.</p>
  <p><tt>docguide guide -a "My Tool" -f features.json -o guide.html</tt></p>
  <p>The man page is converted with <tt>groff -t -mandoc -Thtml</tt>.  Use
  <tt>--formatter</tt> or the <tt>DOCGUIDE_FORMATTER</tt> environment variable
  to run a different converter, and <tt>--timeout</tt> to bound how long it may
  run.  If the converter is missing or fails, the man page section shows an
  <tt>[ERROR]</tt> line instead.</p>
  <p>Where no converter can be run, supply pre-rendered fragments with
  <tt>--man-page-html</tt> and <tt>--vimdoc-html</tt>; they are used as-is and
  the corresponding generation step is skipped.</p>""",
    )
)

MAN = register_feature(
    FeatureDescription(
        key="man",
        name="Print the Man Page",
        html_body="""<p>Writes the troff source of the man page to standard output.</p>
  <p><tt>docguide man -a "My Tool" &gt; mytool.1</tt></p>""",
    )
)

VIMDOC = register_feature(
    FeatureDescription(
        key="vimdoc",
        name="Print the Help Reference",
        html_body="""<p>Writes a plain-text reference in Vim help format, suitable for
  installing under <tt>~/.vim/doc</tt>.</p>
  <p><tt>docguide vimdoc &gt; ~/.vim/doc/mytool.txt</tt></p>""",
    )
)

PREVIEW = register_feature(
    FeatureDescription(
        key="preview",
        name="Preview in the Terminal",
        html_body="""<p>Opens an interactive terminal viewer listing every section of
  the guide.  Select a section to read its text.</p>
  <p><tt>docguide preview -f features.json</tt></p>""",
    )
)

__all__ = ["GUIDE", "MAN", "PREVIEW", "VIMDOC"]
