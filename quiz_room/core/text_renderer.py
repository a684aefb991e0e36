"""Markdown rendering for question and answer text.

Question files may use light markdown (emphasis, line breaks). Both the Qt
monitor (rich-text labels) and the controller page render through the same
instance so the two never disagree.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from markdown_it import MarkdownIt


@dataclass(slots=True)
class MarkdownRenderer:
    """Converts markdown into HTML fragments."""

    enable_html: bool = False
    _markdown: MarkdownIt = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._markdown = MarkdownIt("commonmark", {"html": self.enable_html, "breaks": True})

    def render_fragment(self, markdown_text: str) -> str:
        """Render a markdown string into an HTML fragment."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return ""
        return self._markdown.render(sanitized)

    def render_inline(self, markdown_text: str) -> str:
        """Render a single line without wrapping it in a paragraph."""

        sanitized = markdown_text.strip()
        if not sanitized:
            return ""
        return self._markdown.renderInline(sanitized)


# Shared by the monitor and the controller page.
renderer = MarkdownRenderer()
