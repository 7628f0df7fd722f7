from __future__ import annotations

from docguide.extract import extract_between


def test_extract_between_returns_body_content() -> None:
    assert extract_between("xx<body>CONTENT</body>yy", "<body>", "</body>") == "CONTENT"


def test_extract_between_uses_last_closing_delimiter() -> None:
    assert extract_between("<body>A</body>B</body>", "<body>", "</body>") == "A</body>B"


def test_extract_between_missing_start_returns_empty() -> None:
    assert extract_between("no body here</body>", "<body>", "</body>") == ""


def test_extract_between_missing_end_returns_empty() -> None:
    assert extract_between("<body>never closed", "<body>", "</body>") == ""


def test_extract_between_inverted_range_returns_empty() -> None:
    assert extract_between("</body> then <body>", "<body>", "</body>") == ""


def test_extract_between_empty_span_returns_empty() -> None:
    assert extract_between("<body></body>", "<body>", "</body>") == ""


def test_extract_between_preserves_whitespace_and_markup() -> None:
    text = "<html><body>\n  <p>a &amp; b</p>\n</body></html>"
    assert extract_between(text, "<body>", "</body>") == "\n  <p>a &amp; b</p>\n"
