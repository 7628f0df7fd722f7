from __future__ import annotations

from ..guide.types import GuideContent
from .sections import PreviewSection, build_preview_sections, html_to_text


def launch_preview(content: GuideContent) -> None:
    try:
        from .app import GuidePreviewApp
    except ImportError as exc:  # pragma: no cover - textual missing
        raise RuntimeError(
            "The Textual dependency is required for docguide preview. "
            "Install with `pip install textual`."
        ) from exc

    app = GuidePreviewApp(content)
    try:
        app.run()
    except KeyboardInterrupt:
        return


__all__ = ["PreviewSection", "build_preview_sections", "html_to_text", "launch_preview"]
