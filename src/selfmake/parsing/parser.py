# selfmake/parsing/parser.py
from __future__ import annotations

import argparse

from selfmake.utils.extensions import KINDS, LANGUAGES


def _add_search_paths(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "-I",
        "--include-dir",
        metavar="DIR",
        action="append",
        dest="include_dirs",
        default=[],
        help="Search directory for include resolution. Repeatable; earlier directories win.",
    )


def _build_parser() -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - Search paths only come from -I flags, never from the environment.
        - The compiler and its flags come from CXX / CXXFLAGS (see
          selfmake.runtime.config).
    """
    p = argparse.ArgumentParser(
        prog="selfmake",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "selfmake – include scanning, header resolution and self-rebuilding builds\n"
            "Compiler: $CXX (default: the toolchain Python was built with); "
            "extra flags: $CXXFLAGS."
        ),
    )
    p.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit logs as JSON lines on stderr (also SELFMAKE_JSON_LOGS=1).",
    )
    p.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    sub = p.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    # -----------------------
    # scan
    # -----------------------
    p_scan = sub.add_parser(
        "scan",
        help="List the includes of every matching file under ROOT.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p_scan.add_argument("root", metavar="ROOT", help="Directory to scan recursively.")
    p_scan.add_argument(
        "--lang",
        choices=LANGUAGES,
        default="cpp",
        help="Dialect preset for the extension allow-list (default: cpp).",
    )
    p_scan.add_argument(
        "--kind",
        choices=KINDS,
        default="all",
        help="Restrict the preset to headers or implementation files (default: all).",
    )
    p_scan.add_argument(
        "-s",
        "--ext",
        metavar="EXT",
        action="append",
        dest="extensions",
        help="Explicit extension to scan (e.g. 'h' or '.ipp'). Repeatable; overrides --lang/--kind.",
    )
    p_scan.add_argument(
        "--resolve",
        action="store_true",
        help="Append ' -- <path>' to every include that resolves.",
    )
    _add_search_paths(p_scan)

    # -----------------------
    # resolve
    # -----------------------
    p_res = sub.add_parser("resolve", help="Resolve one include target to a file.")
    p_res.add_argument("target", metavar="TARGET", help="Include target as written between the delimiters.")
    p_res.add_argument(
        "--from",
        metavar="FILE",
        dest="relative_to",
        required=True,
        help="The including file; quoted includes are tried next to it.",
    )
    p_res.add_argument(
        "--angle",
        action="store_true",
        help="Treat TARGET as <target> (search paths only) instead of \"target\".",
    )
    _add_search_paths(p_res)

    # -----------------------
    # run
    # -----------------------
    p_run = sub.add_parser("run", help="Run one command and exit with its normalized status.")
    p_run.add_argument("argv", metavar="ARG", nargs=argparse.REMAINDER, help="Command and arguments (after --).")

    # -----------------------
    # build
    # -----------------------
    p_build = sub.add_parser(
        "build",
        help="Rebuild PROGRAM if stale, then compile INPUT files.",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p_build.add_argument("inputs", metavar="INPUT", nargs="*", help="Sources for the downstream compile.")
    p_build.add_argument(
        "--program",
        metavar="PATH",
        help=(
            "Self-rebuilding program. When older than --source it is backed up to\n"
            "PATH.old, recompiled, re-run, and selfmake exits with its status."
        ),
    )
    p_build.add_argument(
        "--source",
        metavar="PATH",
        help="Source of --program (default: PATH with suffix .cc).",
    )
    p_build.add_argument("-o", "--output", metavar="FILE", help="Output of the downstream compile.")
    _add_search_paths(p_build)

    return p
