# textinterp/parsing/parser.py
from __future__ import annotations

import argparse

from textinterp.processing.guards import GuardPolicy


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser.

    Notes:
        - Guard/marker/classifier flags default to None so unset flags do not
          override TEXTINTERP_* environment settings.
    """
    p = argparse.ArgumentParser(
        prog="textinterp",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "textinterp – recursive 'template interpolation\n"
            "Tokens such as 'noun are replaced from a JSON mapping; replacements "
            "that contain further templates are expanded recursively."
        ),
    )

    g_in = p.add_argument_group("Input")
    g_eng = p.add_argument_group("Engine")
    g_out = p.add_argument_group("Output & diagnostics")

    g_in.add_argument(
        "text",
        nargs="*",
        metavar="TEXT",
        help="Text to interpolate. Joined with single spaces. If omitted, -f or stdin is read.",
    )
    g_in.add_argument(
        "-f",
        "--file",
        metavar="FILE",
        dest="input_file",
        help="Read the text to interpolate from FILE ('-' for stdin).",
    )
    g_in.add_argument(
        "-m",
        "--map",
        metavar="MAP.json",
        dest="map_file",
        required=True,
        help=(
            "JSON object mapping template names to a replacement string or a list of "
            "alternatives (one is picked at random, see --seed)."
        ),
    )
    g_in.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for picking among list alternatives (reproducible output).",
    )

    g_eng.add_argument(
        "--guard",
        choices=[m.value for m in GuardPolicy],
        default=None,
        help=(
            "Recursion guard policy:\n"
            "  depth – fail once nested expansion reaches --limit (default)\n"
            "  cycle – fail as soon as a template re-enters its own expansion"
        ),
    )
    g_eng.add_argument(
        "--limit",
        type=int,
        default=None,
        metavar="N",
        help="Depth ceiling for the depth policy (default 25).",
    )
    g_eng.add_argument(
        "--marker",
        default=None,
        help="Template marker for the default classifier (default: apostrophe).",
    )
    g_eng.add_argument(
        "--classifier",
        dest="classifier_ref",
        metavar="REF",
        default=None,
        help="Custom classifier: 'plugin:<name>' or 'module.path:Attr'.",
    )

    g_out.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 3 when the output still contains templates.",
    )
    g_out.add_argument(
        "--report",
        action="store_true",
        help="Print a JSON interpolation report to stderr.",
    )
    g_out.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON lines.",
    )
    g_out.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return p
