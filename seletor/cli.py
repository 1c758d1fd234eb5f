"""Interface de linha de comando para montar seletores CSS."""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from seletor.domain import SelectorBuilder, SelectorKind
from seletor.schemas import parse_selector_payload
from seletor.settings import get_log_level

_FRAGMENT_OPTIONS = (
    ("--element", SelectorKind.ELEMENT, "Tipo do elemento, ex.: div"),
    ("--id", SelectorKind.ID, "Identificador sem '#'"),
    ("--class", SelectorKind.CLASS, "Classe sem '.'; pode repetir"),
    ("--attr", SelectorKind.ATTRIBUTE, "Atributo sem colchetes; pode repetir"),
    ("--pseudo-class", SelectorKind.PSEUDO_CLASS, "Pseudo-classe sem ':'; pode repetir"),
    ("--pseudo-element", SelectorKind.PSEUDO_ELEMENT, "Pseudo-elemento sem '::'"),
)


class _AppendFragment(argparse.Action):
    """Acumula ``(kind, value)`` em um único destino preservando a ordem da linha."""

    def __call__(self, parser, namespace, values, option_string=None):
        parts = list(getattr(namespace, self.dest, None) or [])
        parts.append((self.const, values))
        setattr(namespace, self.dest, parts)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seletor - construtor de seletores CSS")
    parser.add_argument(
        "--log-level",
        default=None,
        help="Nível de log (default: SELETOR_LOG_LEVEL ou INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build = subparsers.add_parser(
        "build", help="Monta um seletor a partir de fragmentos na ordem informada"
    )
    for option, kind, help_text in _FRAGMENT_OPTIONS:
        build.add_argument(
            option,
            dest="parts",
            action=_AppendFragment,
            const=kind,
            metavar="VALUE",
            help=help_text,
        )

    render = subparsers.add_parser(
        "render", help="Renderiza um seletor descrito em um arquivo JSON"
    )
    render.add_argument("path", type=Path, help="Caminho para o arquivo JSON")

    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    console = Console()
    level_name = args.log_level or get_log_level()
    handler = RichHandler(console=console, markup=True, rich_tracebacks=True)
    logging.basicConfig(
        level=getattr(logging, str(level_name).upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
    logger = logging.getLogger("seletor.cli")

    try:
        if args.command == "build":
            builder = _build_from_parts(getattr(args, "parts", None) or [])
        else:
            logger.debug("lendo seletor de %s", args.path)
            builder = _load_selector_from_json(args.path)
    except (OSError, ValueError) as exc:
        console.print(f"[red]{escape(str(exc))}[/red]", soft_wrap=True)
        return 1

    console.print(builder.stringify(), markup=False, highlight=False, soft_wrap=True)
    return 0


def _build_from_parts(parts: Sequence[tuple[SelectorKind, str]]) -> SelectorBuilder:
    if not parts:
        raise ValueError("Informe ao menos um fragmento, ex.: --element div")
    builder = SelectorBuilder()
    for kind, value in parts:
        builder.add(kind, value)
    return builder


def _load_selector_from_json(path: Path) -> SelectorBuilder:
    data: Any = json.loads(path.read_text(encoding="utf-8"))
    return parse_selector_payload(data).to_domain()


if __name__ == "__main__":
    raise SystemExit(main())
