from __future__ import annotations

from typing import Dict

from .base import FormatterFactory, PhraseFormatter
from .babel_backend import BabelPhraseFormatter
from .plain import PlainPhraseFormatter


_BACKENDS: Dict[str, type] = {
    BabelPhraseFormatter.backend_id: BabelPhraseFormatter,
    PlainPhraseFormatter.backend_id: PlainPhraseFormatter,
}


def get_formatter_factory(backend_id: str) -> FormatterFactory:
    if backend_id not in _BACKENDS:
        raise KeyError(f"Unknown formatter backend: {backend_id}")
    return _BACKENDS[backend_id]


def list_backends() -> Dict[str, str]:
    """backend_id -> display_name"""
    return {k: v.display_name for k, v in _BACKENDS.items()}


__all__ = [
    "BabelPhraseFormatter",
    "FormatterFactory",
    "PhraseFormatter",
    "PlainPhraseFormatter",
    "get_formatter_factory",
    "list_backends",
]
