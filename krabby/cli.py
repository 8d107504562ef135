"""
cli – Command line entry point.

    krabby list [GENERATIONS]
    krabby name NAME [--form FORM] [--info] [--shiny] [--no-title] [--padding-left N]
    krabby random [GENERATIONS] [--no-mega] [--no-gmax] [--no-regional] [--no-variant] ...
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from krabby.commands import (
    NameOptions, PokemonOptions, RandomOptions,
    list_pokemon, load_db, pokemon_by_name, random_pokemon,
)
from krabby.config import DEFAULT_GENERATIONS, load_config
from krabby.errors import KrabbyError
from krabby.forms import Form
from krabby.generations import Generations

logger = logging.getLogger(__name__)

GENERATIONS_HELP = "Generation number, range (1-9), or list of generations (1,3,6)"


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must be zero or positive")
    return number


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--info", "-i", action="store_true",
                        help="Print pokedex entry (if it exists)")
    parser.add_argument("--shiny", "-s", action="store_true",
                        help="Show the shiny pokemon version instead")
    parser.add_argument("--no-title", action="store_true",
                        help="Do not display pokemon name")
    parser.add_argument("--padding-left", type=_non_negative, default=0,
                        help="Set amount of padding to the left (default: 0)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="krabby",
        description="Print pokemon sprites in your terminal",
    )
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--config", type=Path, default=None,
                        help="Path to the settings file")
    sub = parser.add_subparsers(dest="command", required=True)

    list_cmd = sub.add_parser("list", help="Print list of all pokemon")
    list_cmd.add_argument("generations", nargs="?", default=DEFAULT_GENERATIONS,
                          help=f"{GENERATIONS_HELP} (default: {DEFAULT_GENERATIONS})")

    name_cmd = sub.add_parser("name", help="Select pokemon by name: eg. 'pikachu'")
    name_cmd.add_argument("name", help="Who's that pokemon!?")
    name_cmd.add_argument("--form", "-f", default="regular",
                          help="Form (eg. regular, mega, etc.) (default: regular)")
    _add_common(name_cmd)

    random_cmd = sub.add_parser("random", help="Show a random pokemon")
    random_cmd.add_argument("generations", nargs="?", default=DEFAULT_GENERATIONS,
                            help=f"{GENERATIONS_HELP} (default: {DEFAULT_GENERATIONS})")
    random_cmd.add_argument("--no-mega", action="store_true", help="Do not show mega pokemon")
    random_cmd.add_argument("--no-gmax", action="store_true", help="Do not show gigantamax pokemon")
    random_cmd.add_argument("--no-regional", action="store_true", help="Do not show regional pokemon")
    random_cmd.add_argument("--no-variant", action="store_true",
                            help="Do not show any variant: mega, gmax, regional or one-off forms")
    _add_common(random_cmd)
    return parser


def _common_options(args: argparse.Namespace) -> PokemonOptions:
    return PokemonOptions(
        info=args.info,
        shiny=args.shiny,
        no_title=args.no_title,
        padding_left=args.padding_left,
    )


def run(args: argparse.Namespace) -> str:
    db = load_db(load_config(args.config))

    if args.command == "list":
        return list_pokemon(Generations.parse(args.generations), db)

    if args.command == "name":
        return pokemon_by_name(
            NameOptions(name=args.name, form=Form.parse(args.form), common=_common_options(args)),
            db,
        )

    return random_pokemon(
        RandomOptions(
            generations=Generations.parse(args.generations),
            no_mega=args.no_mega,
            no_gmax=args.no_gmax,
            no_regional=args.no_regional,
            no_variant=args.no_variant,
            common=_common_options(args),
        ),
        db,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        output = run(args)
    except KrabbyError as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
