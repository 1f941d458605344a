"""Demo runs of the patterns and the command that starts them."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from patterndemos.creators import create_creator_client
from patterndemos.dialogs import DialogType, create_dialog_client
from patterndemos.singleton import Singleton, SingletonClient

DEFAULT_LOG = "logs/output.log"

_END_BANNER = "************************************* The End *********************************"


def _banner(out: TextIO, text: str) -> None:
    out.write(f"\n{text}\n")


def run_dialog_demo(out: TextIO) -> None:
    """Build a window, an HTML and an invalid dialog client and use them."""
    _banner(out, "************ Factory Design Pattern Example Dialog and Button Demo ***********")
    for kind in DialogType:
        try:
            client = create_dialog_client(kind, out)
        except ValueError as exc:
            _banner(out, str(exc))
            continue
        client.action()
    _banner(out, _END_BANNER)


def run_factory_demo(out: TextIO) -> None:
    """Build clients for creators 1, 2 and the non-existent 3 and use them."""
    _banner(out, "******************** Factory Design Pattern Template Demo ********************")
    for kind in (1, 2, 3):
        try:
            client = create_creator_client(kind, out)
        except ValueError as exc:
            _banner(out, str(exc))
            continue
        client.action()
    _banner(out, _END_BANNER)


def run_singleton_demo(out: TextIO) -> None:
    """Have three clients share one singleton."""
    Singleton.reset()
    _banner(out, "****************** Singleton Design Pattern Template Demo ********************")
    for name in ("client1", "client2", "client3"):
        SingletonClient(out).action(name)
    _banner(out, _END_BANNER)


_DEMOS = {
    "dialog": run_dialog_demo,
    "factory": run_factory_demo,
    "singleton": run_singleton_demo,
}


def main(argv: list[str] | None = None) -> int:
    """Run a demo, writing its output to a log file."""
    parser = argparse.ArgumentParser(prog="patterndemos", description=__doc__)
    parser.add_argument(
        "demo", nargs="?", default="all", choices=[*_DEMOS, "all"],
        help="which demo to run (default: all)",
    )
    parser.add_argument("--log", default=DEFAULT_LOG, help="output log file")
    args = parser.parse_args(argv)

    try:
        log = open(args.log, "w", encoding="utf-8")
    except OSError:
        print("failed to open output log file.", file=sys.stderr)
        return 1

    demos = list(_DEMOS.values()) if args.demo == "all" else [_DEMOS[args.demo]]
    with log:
        for demo in demos:
            demo(log)
    return 0


if __name__ == "__main__":
    sys.exit(main())