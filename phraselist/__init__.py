from __future__ import annotations

from .config import ListFormatConfig, load_config, save_config
from .errors import ArrayArgumentError, ArrayErrorCode
from .formatters import (
    BabelPhraseFormatter,
    PhraseFormatter,
    PlainPhraseFormatter,
    get_formatter_factory,
    list_backends,
)
from .sequence import PhraseList
from .sets import is_array_like

__version__ = "1.0.0"

__all__ = [
    "ArrayArgumentError",
    "ArrayErrorCode",
    "BabelPhraseFormatter",
    "ListFormatConfig",
    "PhraseFormatter",
    "PhraseList",
    "PlainPhraseFormatter",
    "get_formatter_factory",
    "is_array_like",
    "list_backends",
    "load_config",
    "save_config",
]
