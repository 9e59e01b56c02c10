"""Argument parsing functionality for the packageinfo CLI."""

import argparse


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="packageinfo",
        description=(
            "packageinfo - Inspect package requirements, versions and resolutions"
        ),
        add_help=True,
    )

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default=None)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML)",
                        action="store",
                        type=str)

    sub = parser.add_subparsers(dest="COMMAND", required=True)

    req = sub.add_parser("req", help="Classify a manifest dependency entry")
    req.add_argument("NAME", help="Dependency name, e.g. lodash or @opam/dune")
    req.add_argument("REQUIREMENT", help="Requirement string from the manifest")

    match = sub.add_parser("matches", help="Check whether a version satisfies a spec")
    match.add_argument("SPEC", help="Canonical version spec, e.g. ^1.2.0 or github:org/repo")
    match.add_argument("VERSION", help="Canonical version, e.g. 1.2.3 or opam:4.14.0")

    manifest = sub.add_parser("manifest",
                              help="Print effective dependencies of a manifest (JSON or YAML)")
    manifest.add_argument("PATH", help="Path to the manifest file")
    manifest.add_argument("-f", "--format",
                          dest="OUTPUT_FORMAT",
                          help="Output format (text or json)",
                          action="store",
                          type=str.lower,
                          choices=['text', 'json'],
                          default='text')

    return parser.parse_args(argv)
