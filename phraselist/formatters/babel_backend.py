from __future__ import annotations

from typing import Dict, Sequence, Tuple

from babel import Locale
from babel.lists import format_list

from ..config import MODES, STYLES


# (mode, style) -> CLDR list pattern name
_PATTERNS: Dict[Tuple[str, str], str] = {
    ("conjunction", "long"): "standard",
    ("conjunction", "short"): "standard-short",
    ("conjunction", "narrow"): "standard-narrow",
    ("disjunction", "long"): "or",
    ("disjunction", "short"): "or-short",
    ("disjunction", "narrow"): "or-narrow",
}


def parse_locale(identifier: str) -> Locale:
    """
    Accepts BCP 47 ("en-GB") as well as POSIX-ish ("en_GB") identifiers.
    Raises babel.UnknownLocaleError / ValueError for anything Babel can't resolve.
    """
    if not isinstance(identifier, str):
        raise TypeError(f"Locale identifier must be a string, got {type(identifier).__name__}")
    return Locale.parse(identifier.strip().replace("-", "_"))


class BabelPhraseFormatter:
    backend_id = "babel"
    display_name = "CLDR (Babel)"

    def __init__(self, locale: str, style: str, mode: str) -> None:
        if mode not in MODES:
            raise ValueError(f"Unknown list mode: {mode!r} (expected one of {', '.join(MODES)})")
        if style not in STYLES:
            raise ValueError(f"Unknown list style: {style!r} (expected one of {', '.join(STYLES)})")

        self.locale = locale
        self.style = style
        self.mode = mode
        self._locale = parse_locale(locale)
        self._pattern = _PATTERNS[(mode, style)]

        # Babel resolves missing short/narrow patterns through its own fallback chain;
        # a trial run surfaces whatever it still rejects at construction time
        format_list(["a", "b"], style=self._pattern, locale=self._locale)

    def format(self, items: Sequence[str]) -> str:
        return format_list(list(items), style=self._pattern, locale=self._locale)

    def __repr__(self) -> str:
        return f"BabelPhraseFormatter(locale={self.locale!r}, style={self.style!r}, mode={self.mode!r})"
