"""Command-line argument parsing for export2md.

This module defines the command-line interface for export2md, handling argument
parsing, value conversion and the translation of arguments into a TraversalConfig.
"""

import argparse
import sys
from pathlib import Path
from typing import Any, Dict, List, NoReturn

from export2md import __version__
from export2md.config import TraversalConfig, build_config
from export2md.exceptions import ExportUsageError
from export2md.export2md import DEFAULT_OUTPUT_PATH
from export2md.sizes import parse_file_size


class ExportArgumentParser(argparse.ArgumentParser):
    """Argument parser that shows the full help, not only the usage line, on errors."""

    def error(self, message: str) -> NoReturn:
        sys.stderr.write(f"Error: {message}\n")
        self.print_help(sys.stderr)
        self.exit(2)


def comma_list(value: str) -> List[str]:
    """Split a comma separated list, dropping empty items.

    Example:
        >>> comma_list("temp, cache,,dist")
        ['temp', 'cache', 'dist']
    """
    return [item.strip() for item in value.split(",") if item.strip()]


def depth_value(value: str) -> int:
    """Convert a ``-d/--depth`` value; -1 means unlimited."""
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: '{value}' is not an integer")
    if depth < -1:
        raise argparse.ArgumentTypeError(str(ExportUsageError("--depth", f"must be -1 or greater, got {depth}")))
    return depth


def max_size_value(value: str) -> int:
    """Convert a ``-s/--max-size`` value (kilobytes, or a size with a unit) to bytes."""
    try:
        return parse_file_size(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(ExportUsageError("--max-size", str(e))))


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with export2md's options.
    """
    description = """
    export2md : exporte l'arborescence d'un projet et le contenu de ses fichiers
    dans un unique document Markdown.

    Le document contient une vue arborescente du dossier suivie d'une structure
    détaillée dans laquelle chaque fichier texte est intégré dans un bloc de code
    repliable. Les fichiers binaires, trop volumineux ou illisibles sont signalés
    sans leur contenu.
    """

    epilog = """
    Exemples:
      export2md .
      export2md -o docs/structure.md
      export2md -d 2 -e temp,cache ./mon-projet
      export2md -s 200 --include-hidden ./mon-projet
      export2md -i "*.log" -i "!important.log" ./mon-projet
    """

    parser = ExportArgumentParser(
        prog="export2md",
        allow_abbrev=False,
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"export2md {__version__}", help="Affiche la version et quitte"
    )
    parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=Path("."),
        metavar="chemin",
        help="Dossier à exporter (défaut: dossier courant)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=Path(DEFAULT_OUTPUT_PATH),
        metavar="fichier",
        help=f"Spécifie le fichier de sortie (défaut: {DEFAULT_OUTPUT_PATH})",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=depth_value,
        default=-1,
        metavar="nombre",
        help="Limite la profondeur de la structure détaillée (défaut: -1, illimitée)",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=comma_list,
        action="append",
        default=[],
        metavar="dossiers",
        help="Liste de dossiers à exclure (séparés par des virgules), ajoutée aux exclusions par défaut",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        action="append",
        default=[],
        metavar="motif",
        help="Motif de type .gitignore à exclure (peut être répété)",
    )
    parser.add_argument(
        "-s",
        "--max-size",
        type=max_size_value,
        default=None,
        metavar="Ko",
        help="Taille maximale d'un fichier intégré, en kilo-octets ou avec une unité comme 2MB (défaut: 1024)",
    )
    parser.add_argument(
        "--include-hidden",
        action="store_true",
        help="Inclut les fichiers et dossiers dont le nom commence par un point",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Parcourt les dossiers atteints par un lien symbolique",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Affiche un résumé des éléments exportés sur la sortie d'erreur",
    )

    return parser


def config_from_args(args: argparse.Namespace) -> TraversalConfig:
    """Build the traversal configuration from parsed arguments."""
    overrides: Dict[str, Any] = {
        "max_depth": args.depth,
        "include_hidden": args.include_hidden,
        "follow_symlinks": args.follow_symlinks,
        "ignore_patterns": tuple(args.ignore),
    }
    if args.max_size is not None:
        overrides["max_file_size"] = args.max_size

    extra_folders = [name for names in args.exclude for name in names]
    return build_config(extra_excluded_folders=extra_folders, **overrides)
