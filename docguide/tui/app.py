from __future__ import annotations

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, VerticalScroll
from textual.widgets import Footer, Header, ListItem, ListView, Static

from ..guide.types import GuideContent
from .sections import build_preview_sections

APP_CSS = """
Screen {
    background: $panel;
}

.panel {
    height: 1fr;
    border: round $accent;
    padding: 1;
    background: $boost;
}

#section-list {
    width: 32;
}

#section-scroll {
    width: 1fr;
}

.section-title {
    text-style: bold;
    margin-bottom: 1;
}
"""


class GuidePreviewApp(App):
    """Browse the sections of an assembled User's Guide in the terminal."""

    CSS_PATH = None
    CSS = APP_CSS
    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit"),
    ]

    def __init__(self, content: GuideContent) -> None:
        super().__init__()
        self.content = content
        self.sections = build_preview_sections(content)

    def compose(self) -> ComposeResult:
        yield Header()
        yield Horizontal(
            ListView(
                *[ListItem(Static(section.title, markup=False)) for section in self.sections],
                id="section-list",
                classes="panel",
            ),
            VerticalScroll(
                Static("", id="section-title", classes="section-title", markup=False),
                Static("", id="section-body", markup=False),
                id="section-scroll",
                classes="panel",
            ),
        )
        yield Footer()

    def on_mount(self) -> None:
        self.title = "docguide preview"
        self.sub_title = self.content.about_text
        if self.sections:
            self.show_section(0)

    def show_section(self, index: int) -> None:
        if not (0 <= index < len(self.sections)):
            return
        section = self.sections[index]
        self.query_one("#section-title", Static).update(section.title)
        self.query_one("#section-body", Static).update(section.text or "(empty)")

    @on(ListView.Highlighted, "#section-list")
    def handle_highlight(self, event: ListView.Highlighted) -> None:
        index = event.list_view.index
        if index is not None:
            self.show_section(index)
