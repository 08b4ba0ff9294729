from __future__ import annotations

from typing import List, Sequence, Tuple

import pytest


class RecordingFormatter:
    """Stands in for a locale library: renders "mode(locale/style): a|b|c"."""

    created: List[Tuple[str, str, str]] = []

    def __init__(self, locale: str, style: str, mode: str) -> None:
        if locale == "invalid":
            raise ValueError(f"Incorrect locale information provided: {locale}")
        self.locale = locale
        self.style = style
        self.mode = mode
        self.calls: List[List[str]] = []
        RecordingFormatter.created.append((locale, style, mode))

    def format(self, items: Sequence[str]) -> str:
        self.calls.append(list(items))
        return f"{self.mode}({self.locale}/{self.style}): {'|'.join(items)}"


@pytest.fixture
def recording_factory():
    RecordingFormatter.created = []
    yield RecordingFormatter
    RecordingFormatter.created = []
