from __future__ import annotations

import argparse

from leapfrog.ui.cli import commands
from leapfrog.simulation.policies import available_policies


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LEAPFROG")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common_parent = argparse.ArgumentParser(add_help=False)
    common_parent.add_argument("--seed", type=int, default=None)

    sub = subparsers.add_parser("play", parents=[common_parent], help="Play in a pygame window")
    sub.set_defaults(func=commands.cmd_play)

    sub = subparsers.add_parser("simulate", parents=[common_parent], help="Run headless games with a scripted policy")
    sub.add_argument("--policy", choices=available_policies(), default=None)
    sub.add_argument("--sims", type=int, default=None)
    sub.add_argument("--save-replay", action="store_true", help="Keep the best game for `replay`")
    sub.set_defaults(func=commands.cmd_simulate)

    sub = subparsers.add_parser("report", help="Print the saved simulation summary")
    sub.set_defaults(func=commands.cmd_report)

    sub = subparsers.add_parser("replay", help="Watch a recorded game")
    sub.add_argument("path", nargs="?", default=None)
    sub.set_defaults(func=commands.cmd_replay)

    sub = subparsers.add_parser("doctor", help="Check environment/dependencies")
    sub.set_defaults(func=commands.cmd_doctor)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
