from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable
from pathlib import Path

from minigames.domain.game_state import Tuning
from minigames.infra.exceptions import TuningDecodeError, TuningSaveError
from minigames.infra.tuning_files import load_tuning, save_tuning


def resolve_tuning(args: argparse.Namespace) -> Tuning:
    overrides = {"wall_stops_momentum": True} if args.wall_stop else {}
    return load_tuning(Path(args.tuning) if args.tuning else None, **overrides)


def cmd_platformer(args: argparse.Namespace) -> int:
    try:
        tuning = resolve_tuning(args)
    except TuningDecodeError as e:
        print(f"minigames: {e}", file=sys.stderr)
        return 2

    if args.dump_tuning:
        try:
            save_tuning(tuning, Path(args.dump_tuning))
        except TuningSaveError as e:
            print(f"minigames: {e}", file=sys.stderr)
            return 1
        print(f"Wrote {args.dump_tuning}")
        return 0

    # Imported late so the CLI works on machines without Tk for --dump-tuning.
    from minigames.app.platformer_app import PlatformerApp

    PlatformerApp(tuning).run()
    return 0


def cmd_tictactoe(args: argparse.Namespace) -> int:
    from minigames.app.tictactoe_app import TicTacToeApp

    TicTacToeApp(seed=args.seed).run()
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="minigames", description="Two small tkinter games.")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING).",
    )
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("platformer", help="Run the ground split platformer.")
    sp.add_argument("--tuning", default=None, help="JSON tuning file overriding the physics defaults.")
    sp.add_argument(
        "--wall-stop",
        action="store_true",
        help="Zero horizontal speed when the player hits a side wall.",
    )
    sp.add_argument("--dump-tuning", default=None, metavar="PATH", help="Write the resolved tuning to PATH and exit.")
    sp.set_defaults(fn=cmd_platformer)

    sp = sub.add_parser("tictactoe", help="Run tic-tac-toe.")
    sp.add_argument("--seed", type=int, default=None, help="Seed for the computer opponent's random picks.")
    sp.set_defaults(fn=cmd_tictactoe)

    return p


def main(argv: Iterable[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return int(args.fn(args))


if __name__ == "__main__":
    raise SystemExit(main())
