from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional, Sequence

from babel import UnknownLocaleError

from .config import STYLES, ListFormatConfig, load_config, save_config
from .formatters import get_formatter_factory, list_backends
from .sequence import PhraseList


logger = logging.getLogger(__name__)

_MISSING = object()


def _split_items(value: str) -> List[str]:
    return [v for v in value.split(",") if v]


def _resolve_config(args: argparse.Namespace) -> ListFormatConfig:
    cfg = load_config(args.config)
    return ListFormatConfig(
        locale=args.locale or cfg.locale,
        style=args.style or cfg.style,
        backend=args.backend or cfg.backend,
    )


def _build_list(args: argparse.Namespace) -> PhraseList:
    cfg = _resolve_config(args)
    return PhraseList.from_iterable(
        args.items,
        locale=cfg.locale,
        style=cfg.style,
        formatter_factory=get_formatter_factory(cfg.backend),
    )


def cmd_phrase(args: argparse.Namespace) -> int:
    items = _build_list(args)
    if args.command == "conjunction":
        print(items.conjunction())
    else:
        print(items.disjunction())
    return 0


def cmd_set(args: argparse.Namespace) -> int:
    items = _build_list(args)
    others = [_split_items(v) for v in (args.others or [])]

    if args.command == "unique":
        result = items.unique(*others)
    elif args.command == "intersection":
        result = items.intersection(*others)
    else:
        result = items.xor(*others)

    print(json.dumps(result, ensure_ascii=False))
    return 0


def cmd_last(args: argparse.Namespace) -> int:
    items = _build_list(args)
    value = items.last(args.offset, default=_MISSING)
    if value is _MISSING:
        print(f"No item at offset {args.offset} (list has {len(items)})", file=sys.stderr)
        return 1
    print(value)
    return 0


def cmd_config(args: argparse.Namespace) -> int:
    cfg = _resolve_config(args)
    # fail before saving anything the formatters would reject
    PhraseList(locale=cfg.locale, style=cfg.style, formatter_factory=get_formatter_factory(cfg.backend))

    if args.save:
        path = save_config(cfg, args.config)
        logger.info("Saved list format defaults to %s", path)

    print(json.dumps(cfg.to_dict(), ensure_ascii=False, indent=2))
    return 0


def cmd_backends(args: argparse.Namespace) -> int:
    for backend_id, name in list_backends().items():
        print(f"{backend_id:8} {name}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--locale", default=None, help="Locale for phrasing, e.g. en-GB, es (default: saved config or en-GB)")
    common.add_argument("--style", default=None, choices=STYLES, help="List style (default: saved config or short)")
    common.add_argument("--backend", default=None, help="Formatter backend id, see `phraselist backends`")
    common.add_argument("--config", default=None, help="Path to config.json (default: user data dir)")

    p = argparse.ArgumentParser(
        prog="phraselist",
        description="Phrase lists as 'a, b and c' / 'a, b or c' and run set-like helpers over them.",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("conjunction", "Print the items joined as 'a, b and c'"),
        ("disjunction", "Print the items joined as 'a, b or c'"),
    ):
        sp = sub.add_parser(name, parents=[common], help=help_text)
        sp.add_argument("items", nargs="*", help="List items")
        sp.set_defaults(func=cmd_phrase)

    for name, help_text in (
        ("unique", "Distinct items of the list and every --with list"),
        ("intersection", "Distinct items shared by the list and every --with list"),
        ("xor", "Items found in exactly one of the list and the --with lists"),
    ):
        sp = sub.add_parser(name, parents=[common], help=help_text)
        sp.add_argument("items", nargs="*", help="List items")
        sp.add_argument("--with", dest="others", action="append", metavar="A,B,...", help="Another comma-separated list (repeatable)")
        sp.set_defaults(func=cmd_set)

    sp = sub.add_parser("last", parents=[common], help="Print the last item, or the item OFFSET places before it")
    sp.add_argument("items", nargs="*", help="List items")
    sp.add_argument("--offset", type=int, default=0, help="Offset from the last item (sign is ignored)")
    sp.set_defaults(func=cmd_last)

    sp = sub.add_parser("config", parents=[common], help="Show the effective defaults, optionally saving them")
    sp.add_argument("--save", action="store_true", help="Persist the effective defaults")
    sp.set_defaults(func=cmd_config)

    sp = sub.add_parser("backends", help="List formatter backends")
    sp.set_defaults(func=cmd_backends)

    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        return args.func(args)
    except (UnknownLocaleError, ValueError, KeyError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
