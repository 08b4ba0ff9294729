from __future__ import annotations

from typing import Callable, Protocol, Sequence


class PhraseFormatter(Protocol):
    """
    List phrasing plugin interface.
    One instance is bound to a (locale, style, mode) triple; construction is
    where unsupported values are rejected.
    """
    locale: str
    style: str
    mode: str

    def format(self, items: Sequence[str]) -> str:
        ...


# (locale, style, mode) -> formatter
FormatterFactory = Callable[[str, str, str], PhraseFormatter]
