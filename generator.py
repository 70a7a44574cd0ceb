"""CLI for rendering the demo nginx configuration."""

from __future__ import annotations

import argparse
from pathlib import Path

from nginxc import ConfigFormatter, ConfigWriter, build_example_config
from nginxc.formatter import INDENT_MULTIPLIER


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Build the demo nginx.conf (a static host and a reverse-proxied API host) "
            "and print it or write it to a file."
        )
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="File to write the configuration to (defaults to printing on stdout).",
    )
    parser.add_argument(
        "--indent-width",
        type=int,
        default=INDENT_MULTIPLIER,
        help=f"Spaces per nesting level (default: {INDENT_MULTIPLIER}).",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Disable writer logging.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    formatter = ConfigFormatter(indent_width=args.indent_width)
    document = build_example_config()
    if args.output is None:
        print(formatter.format_document(document), end="")
        return
    writer = ConfigWriter(formatter=formatter, config={"enable_logger": not args.quiet})
    destination = writer.write(document, Path(args.output))
    try:
        display_path = destination.relative_to(Path.cwd())
    except ValueError:
        display_path = destination
    print(f"Wrote {display_path}")


if __name__ == "__main__":
    main()
