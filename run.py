"""cryptgen CLI entry point.

Subcommands generate a seeded dungeon level and dump it as ASCII with its
generation metrics, or answer a line-of-sight query on a seeded level.
Accepts configuration via flags and DUNGEON_* environment variables, with
optional .env loading.

Run `python run.py --help` for details.
"""

import argparse
import json
import os
import sys
from textwrap import dedent

from colorama import Fore, Style, just_fix_windows_console
from dotenv import load_dotenv

just_fix_windows_console()
_COLOR_ENABLED = sys.stdout.isatty()


def _load_version() -> str:
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "VERSION")
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except OSError:
        from cryptgen import __version__

        return __version__


__version__ = _load_version()


def _parse_point(text: str):
    from cryptgen.dungeon import Point

    try:
        xs, ys = text.split(",")
        return Point(int(xs), int(ys))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected x,y but got {text!r}") from None


def parse_args(argv: list[str]) -> argparse.Namespace:
    description = """
    cryptgen dungeon tools

    Generate a seeded dungeon level or test line of sight on one. Map size
    and generation knobs come from CLI flags or environment variables; CLI
    flags take precedence.
    """

    epilog = dedent(
        """
        Environment variables:
          DUNGEON_WIDTH               Map width, odd (default: 79)
          DUNGEON_HEIGHT              Map height, odd (default: 41)
          DUNGEON_MAX_ROOMS           Room target (default: 8)
          DUNGEON_PLACEMENT_ATTEMPTS  Room placement attempts (default: 1000)
          DUNGEON_SECRET_DOOR_CHANCE  Chance per intersection (default: 0.2)
          DUNGEON_SEED                Seed when --seed is omitted
          CRYPTGEN_LOG_LEVEL          debug|info|warn|error (default: info)

        Examples:
          # Generate and dump a level
          python run.py generate --seed 42

          # Metrics only, as JSON
          python run.py generate --seed 42 --json

          # Can (3,5) see (20,7) on seed 42?
          python run.py sight --seed 42 3,5 20,7
        """
    )

    parser = argparse.ArgumentParser(
        prog="cryptgen",
        description=dedent(description),
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        dest="env_file",
        help="Path to a .env file to load before processing flags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"cryptgen {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command")

    def add_level_flags(sub):
        sub.add_argument("--seed", type=int, default=None, help="Level seed (default: env DUNGEON_SEED or random)")
        sub.add_argument("--width", type=int, default=None, help="Map width, odd (default: env DUNGEON_WIDTH or 79)")
        sub.add_argument("--height", type=int, default=None, help="Map height, odd (default: env DUNGEON_HEIGHT or 41)")

    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a level and dump it",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Generate a seeded level, print its ASCII dump and metrics",
    )
    add_level_flags(gen_parser)
    gen_parser.add_argument("--json", action="store_true", help="Print metrics as JSON only")
    gen_parser.set_defaults(command="generate")

    sight_parser = subparsers.add_parser(
        "sight",
        help="Test line of sight between two cells",
        formatter_class=argparse.RawTextHelpFormatter,
        description="Report whether VIEWER can see TARGET on a seeded level",
    )
    add_level_flags(sight_parser)
    sight_parser.add_argument("viewer", type=_parse_point, help="Viewer cell as x,y")
    sight_parser.add_argument("target", type=_parse_point, help="Target cell as x,y")
    sight_parser.set_defaults(command="sight")

    args = parser.parse_args(argv)
    if args.command is None:
        # global flags only: fall through to a default generate
        args = parser.parse_args(list(argv) + ["generate"])
    return args


def _banner(dungeon) -> str:
    def label(text: str) -> str:
        return f"{Fore.YELLOW}{text}{Style.RESET_ALL}" if _COLOR_ENABLED else text

    def value(val) -> str:
        return f"{Fore.GREEN}{val}{Style.RESET_ALL}" if _COLOR_ENABLED else str(val)

    divider = (Fore.MAGENTA + "=" * 40 + Style.RESET_ALL) if _COLOR_ENABLED else "=" * 40
    title = f"{Fore.CYAN}{Style.BRIGHT}cryptgen level{Style.RESET_ALL}" if _COLOR_ENABLED else "cryptgen level"
    m = dungeon.metrics
    return "\n".join(
        [
            divider,
            f"  {title}",
            divider,
            f"  {label('Seed:'):16} {value(dungeon.seed)}",
            f"  {label('Size:'):16} {value(f'{dungeon.width}x{dungeon.height}')}",
            f"  {label('Rooms:'):16} {value(m['rooms_placed'])}",
            f"  {label('Tunnels:'):16} {value(m['tunnels_carved'])}",
            f"  {label('Secret doors:'):16} {value(m['secret_doors'])}",
            f"  {label('Closed doors:'):16} {value(m['closed_doors'])}",
            f"  {label('Runtime (ms):'):16} {value(m['runtime_ms'])}",
            divider,
        ]
    )


def main(argv: list[str]) -> int:
    args = parse_args(argv)
    if getattr(args, "env_file", None):
        load_dotenv(args.env_file)
    else:
        load_dotenv()

    from cryptgen.dungeon import Dungeon, DungeonConfig
    from cryptgen.logging_utils import log

    try:
        config = DungeonConfig.from_env(seed=args.seed, width=args.width, height=args.height)
    except ValueError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 2
    dungeon = Dungeon(config)
    log.info(event="level_ready", command=args.command, seed=dungeon.seed, rooms=len(dungeon.rooms))

    if args.command == "sight":
        visible = dungeon.has_line_of_sight(args.viewer, args.target)
        print(f"{tuple(args.viewer)} -> {tuple(args.target)}: {'visible' if visible else 'blocked'}")
        return 0 if visible else 1

    if args.json:
        payload = {"seed": dungeon.seed, "width": dungeon.width, "height": dungeon.height, "metrics": dungeon.metrics}
        print(json.dumps(payload, indent=2))
        return 0
    print(_banner(dungeon))
    print("\n".join(dungeon.map.to_lines()))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
