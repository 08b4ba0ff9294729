from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, replace
from pathlib import Path
from typing import Any, Mapping, Optional

from .paths import user_data_dir


logger = logging.getLogger(__name__)

STYLES = ("long", "short", "narrow")
MODES = ("conjunction", "disjunction")

DEFAULT_LOCALE = "en-GB"
DEFAULT_STYLE = "short"
DEFAULT_BACKEND = "babel"


@dataclass(frozen=True)
class ListFormatConfig:
    locale: str = DEFAULT_LOCALE
    style: str = DEFAULT_STYLE
    backend: str = DEFAULT_BACKEND  # formatter registry id, see formatters.list_backends()

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ListFormatConfig":
        return cls(
            locale=str(data.get("locale") or DEFAULT_LOCALE),
            style=str(data.get("style") or DEFAULT_STYLE),
            backend=str(data.get("backend") or DEFAULT_BACKEND),
        )

    def merged(self, *, locale: Optional[str] = None, style: Optional[str] = None) -> "ListFormatConfig":
        # empty overrides keep the current value
        return replace(
            self,
            locale=locale or self.locale,
            style=style or self.style,
        )

    def to_dict(self) -> dict:
        return asdict(self)


def config_path() -> Path:
    return user_data_dir() / "config.json"


def load_config(path: str | Path | None = None) -> ListFormatConfig:
    p = Path(path) if path else config_path()
    if not p.exists():
        return ListFormatConfig()
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", p, e)
        return ListFormatConfig()
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object", p)
        return ListFormatConfig()
    return ListFormatConfig.from_mapping(data)


def save_config(cfg: ListFormatConfig, path: str | Path | None = None) -> Path:
    p = Path(path) if path else config_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(cfg.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
    return p
