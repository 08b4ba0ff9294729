from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

from . import sets
from .config import ListFormatConfig
from .formatters import BabelPhraseFormatter, FormatterFactory, PhraseFormatter


logger = logging.getLogger(__name__)

ConfigLike = Union[ListFormatConfig, Mapping[str, Any], None]


def _is_length(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class PhraseList(list):
    """
    A list that can phrase itself ("a, b and c" / "a, b or c") and offers a few
    set-like helpers.

    Formatting configuration lives in slots, never in the list content, so the
    instance iterates, compares and serialises exactly like a plain list:

        >>> items = PhraseList("apple", "orange", "banana")
        >>> items == ["apple", "orange", "banana"]
        True
        >>> items.conjunction()
        'apple, orange and banana'
    """

    __slots__ = ("_config", "_factory", "_conjunction", "_disjunction")

    # (locale, style, mode) -> PhraseFormatter; subclasses may swap the backend
    formatter_factory: FormatterFactory = BabelPhraseFormatter

    def __init__(
        self,
        *items: Any,
        locale: Optional[str] = None,
        style: Optional[str] = None,
        formatter_factory: Optional[FormatterFactory] = None,
    ) -> None:
        # a single int is a length, as with Array(n)
        if len(items) == 1 and _is_length(items[0]):
            length = items[0]
            if length < 0:
                raise ValueError(f"Invalid list length: {length}")
            super().__init__([None] * length)
        else:
            super().__init__(items)

        self._factory = formatter_factory or type(self).formatter_factory
        backend = getattr(self._factory, "backend_id", "custom")
        self._config = ListFormatConfig(backend=backend).merged(locale=locale, style=style)
        self._conjunction, self._disjunction = self._build_formatters(self._config)

    @classmethod
    def from_iterable(cls, iterable: Iterable[Any], **options: Any) -> "PhraseList":
        obj = cls(**options)
        obj.extend(iterable)
        return obj

    # -----------------------------
    # Configuration
    # -----------------------------

    @property
    def config(self) -> ListFormatConfig:
        return self._config

    @property
    def locale(self) -> str:
        return self._config.locale

    @locale.setter
    def locale(self, locale: str) -> None:
        self._reconfigure(replace(self._config, locale=locale))

    @property
    def style(self) -> str:
        return self._config.style

    @style.setter
    def style(self, style: str) -> None:
        self._reconfigure(replace(self._config, style=style))

    def _build_formatters(self, cfg: ListFormatConfig) -> tuple[PhraseFormatter, PhraseFormatter]:
        logger.debug("Loading list formatters (locale=%r, style=%r)", cfg.locale, cfg.style)
        return (
            self._factory(cfg.locale, cfg.style, "conjunction"),
            self._factory(cfg.locale, cfg.style, "disjunction"),
        )

    def _reconfigure(self, cfg: ListFormatConfig) -> None:
        # build first: a rejected token must not leave stale formatters behind
        conjunction, disjunction = self._build_formatters(cfg)
        self._config = cfg
        self._conjunction, self._disjunction = conjunction, disjunction

    def _apply_overrides(self, config: ConfigLike, locale: Optional[str], style: Optional[str]) -> None:
        if isinstance(config, ListFormatConfig):
            config = config.to_dict()
        config = config or {}

        locale = locale or config.get("locale")
        style = style or config.get("style")

        if locale:
            self.locale = locale
        if style:
            self.style = style

    # -----------------------------
    # Phrasing
    # -----------------------------

    def conjunction(self, config: ConfigLike = None, *, locale: Optional[str] = None, style: Optional[str] = None) -> str:
        """
        "apple, orange and banana"

        `locale` / `style` (directly or via `config`) are applied to the list
        before formatting and stay in effect afterwards.
        """
        self._apply_overrides(config, locale, style)
        return self._conjunction.format([str(item) for item in self])

    def disjunction(self, config: ConfigLike = None, *, locale: Optional[str] = None, style: Optional[str] = None) -> str:
        """
        "apple, orange or banana"
        """
        self._apply_overrides(config, locale, style)
        return self._disjunction.format([str(item) for item in self])

    # -----------------------------
    # Set-like helpers
    # -----------------------------

    def intersection(self, *arrays: Sequence[Any]) -> list:
        """Distinct items shared by this list and every argument."""
        return sets.intersection(self, *arrays)

    def xor(self, *arrays: Sequence[Any]) -> list:
        """Distinct items found in exactly one of this list and the arguments."""
        return sets.xor(self, *arrays)

    def unique(self, *arrays: Sequence[Any]) -> "PhraseList":
        """
        Distinct items of this list and any additional arrays, first occurrence
        wins. Returns a new instance with the same configuration.
        """
        return self._derive(sets.union(self, *arrays))

    def last(self, offset: int = 0, default: Any = None) -> Any:
        index = len(self) - 1 - abs(offset)
        if 0 <= index < len(self):
            return self[index]
        return default

    def _derive(self, items: Iterable[Any]) -> "PhraseList":
        return type(self).from_iterable(
            items,
            locale=self.locale,
            style=self.style,
            formatter_factory=self._factory,
        )

    @classmethod
    def normalize(cls, value: Any) -> "PhraseList":
        """
        Coerce a value, a sequence, or an existing instance into an instance.
        Existing instances are returned as-is (not copied).
        """
        if isinstance(value, cls):
            return value
        if sets.is_array_like(value):
            return cls.from_iterable(value)
        return cls.from_iterable([value])
