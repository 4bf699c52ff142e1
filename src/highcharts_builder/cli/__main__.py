from __future__ import annotations

import logging
import sys

from dotenv import load_dotenv

from highcharts_builder.cli.list_scripts import main as scripts_main
from highcharts_builder.cli.render_chart import main as render_main

COMMANDS = {
    "render": render_main,
    "scripts": scripts_main,
}


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    # HIGHCHARTS_SCRIPTS_CONFIG may live in .env
    load_dotenv()

    # global flag, only before the command name
    verbose = bool(argv) and argv[0] == "--verbose"
    if verbose:
        argv = argv[1:]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if not argv or argv[0] in {"-h", "--help"}:
        print("Usage: python -m highcharts_builder.cli [--verbose] <command> [options]\n")
        print("Commands:")
        print("  render   Render chart JavaScript or an HTML page from an options file")
        print("  scripts  List the script URLs a chart page needs\n")
        return 0

    cmd = argv[0]
    if cmd in COMMANDS:
        return COMMANDS[cmd](argv[1:])

    print(f"Unknown command: {cmd}", file=sys.stderr)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
