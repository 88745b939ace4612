"""Command-line interface for export2md.

This module provides the command-line entry point: it parses the arguments,
exports the directory and writes the Markdown document to the output file.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (missing directory, output not writable)
    2: Command-line syntax error (unknown option, invalid value)

Example:
    # Export the current directory to project-structure.md
    $ export2md

    # Limit the detailed structure to two levels and write elsewhere
    $ export2md -d 2 -o docs/structure.md ./my-project
"""

import sys
from collections.abc import Mapping
from typing import List, Optional

from export2md.cli.argparser import config_from_args, create_parser
from export2md.export2md import ProjectExporter


def format_counts(counts: Mapping[str, int]) -> str:
    """Format the export counts into a human-readable string."""
    return "\n".join(f"{label.capitalize()}: {value}" for label, value in counts.items())


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the export2md command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = config_from_args(args)
        exporter = ProjectExporter(args.path, config)
        output_path = exporter.save(args.output)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    print(f"Structure du projet sauvegardée dans {output_path}")

    if args.summary:
        print(format_counts(exporter.summary()), file=sys.stderr)


if __name__ == "__main__":
    main()
