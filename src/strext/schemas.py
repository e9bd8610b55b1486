from __future__ import annotations

from pydantic import BaseModel


class Hyperlink(BaseModel):
    """An anchor element to render.

    Values are inserted into the markup verbatim: nothing is HTML-escaped,
    so untrusted ``href`` or ``text`` must be escaped by the caller.
    """

    href: str
    text: str = ""
    open_in_new_tab: bool = False

    @property
    def display_text(self) -> str:
        return self.text if self.text else self.href

    def to_html(self) -> str:
        target = " target='_blank'" if self.open_in_new_tab else ""
        return f"<a href='{self.href}'{target}>{self.display_text}</a>"
