from __future__ import annotations

from typing import Sequence

from ..config import MODES, STYLES


_CONNECTIVES = {"conjunction": "and", "disjunction": "or"}


class PlainPhraseFormatter:
    """
    English-only phrasing without locale data, e.g. for environments where a
    deterministic rendering matters more than localisation.

      conjunction: "a, b and c"   (narrow: "a, b, c")
      disjunction: "a, b or c"
    """
    backend_id = "plain"
    display_name = "Plain English"

    def __init__(self, locale: str, style: str, mode: str) -> None:
        if mode not in MODES:
            raise ValueError(f"Unknown list mode: {mode!r}")
        if style not in STYLES:
            raise ValueError(f"Unknown list style: {style!r}")
        lang = (locale or "").replace("_", "-").split("-", 1)[0].lower()
        if lang != "en":
            raise ValueError(f"PlainPhraseFormatter only supports English locales, got {locale!r}")

        self.locale = locale
        self.style = style
        self.mode = mode

    def format(self, items: Sequence[str]) -> str:
        items = list(items)
        if not items:
            return ""
        if len(items) == 1:
            return items[0]

        if self.mode == "conjunction" and self.style == "narrow":
            return ", ".join(items)

        *head, tail = items
        return f"{', '.join(head)} {_CONNECTIVES[self.mode]} {tail}"
