"""
xmlimg CLI.

Reads XML files and writes every base64-encoded image found in the
selected nodes to a directory named after the input file.

Examples:
    xmlimg                                  # all *.xml in the current directory
    xmlimg -i catalog.xml -i books.xml
    xmlimg -i a.xml,b.xml -x ".//item" -d bin -n filename
    xmlimg -i export.xml -o ./images --dump-width 16
"""

from __future__ import annotations

import argparse
import sys

from xmlimg import __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="xmlimg",
        description="Extract base64-encoded images embedded in XML attributes.",
    )
    parser.add_argument(
        "-i",
        "--input",
        action="append",
        default=[],
        metavar="FILES",
        help=(
            "Input XML file(s). Repeat the flag or separate names with a comma. "
            "Default: every *.xml file in the current directory"
        ),
    )
    parser.add_argument(
        "-x",
        "--xpath",
        default=".//img",
        help="XPath locating the tags that contain images (default: .//img)",
    )
    parser.add_argument(
        "-d",
        "--data-attr",
        default="bin",
        help="Attribute holding the base64 data within the node (default: bin)",
    )
    parser.add_argument(
        "-n",
        "--name-attr",
        default="filename",
        help="Attribute holding the image file name (default: filename)",
    )
    parser.add_argument(
        "-o",
        "--output-root",
        default=".",
        help="Directory in which per-file output directories are created (default: .)",
    )
    parser.add_argument(
        "--dump-width",
        type=int,
        default=None,
        help="Bytes per row in the hex dump of undecodable data (default: 30)",
    )
    parser.add_argument(
        "--dump-rows",
        type=int,
        default=None,
        help="Rows in the hex dump of undecodable data (default: 2)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Only print warnings and errors",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entrypoint."""
    from xmlimg.ingest import run, split_filenames
    from xmlimg.runtime import get_extract_config
    from xmlimg.storage import FatalError

    args = build_parser().parse_args(argv)

    try:
        config = get_extract_config(
            input_files=split_filenames(args.input),
            xpath=args.xpath,
            data_attr=args.data_attr,
            name_attr=args.name_attr,
            output_root=args.output_root,
            dump_width=args.dump_width,
            dump_rows=args.dump_rows,
            verbose=not args.quiet,
        )
        run(config)
        return 0
    except FatalError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
