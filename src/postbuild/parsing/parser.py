# postbuild/parsing/parser.py
from __future__ import annotations

import argparse


def _build_parser(version: str = "") -> argparse.ArgumentParser:
    """
    Build the CLI argument parser.

    Notes:
        - ``--input`` is not marked as required: a missing input is reported
          by the CLI itself with exit status 1, not as an argparse usage error.
        - Wildcards must be quoted so the shell does not expand them.
    """
    p = argparse.ArgumentParser(
        prog="postbuild",
        formatter_class=argparse.RawTextHelpFormatter,
        description=(
            "postbuild – inject css/js assets and git hashes into built HTML\n"
            "Rewrites <!-- inject:css -->, <!-- inject:js -->, <!-- inject:git-hash -->\n"
            "and <!-- remove:CONDITION --> regions of the input file."
        ),
    )

    g_io = p.add_argument_group("Input & output")
    g_ast = p.add_argument_group("Assets")
    g_tag = p.add_argument_group("Tag shape")
    g_misc = p.add_argument_group("Miscellaneous")

    g_io.add_argument("-i", "--input", metavar="FILE", dest="input", help="Input file")
    g_io.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        dest="output",
        help="Output file (defaults to input when omitted)",
    )

    g_ast.add_argument(
        "-c",
        "--css",
        metavar="PATTERN",
        dest="css",
        help="css file(s) to inject (file or directory). Wildcards can be used with quotation: '**/*.css'",
    )
    g_ast.add_argument(
        "-j",
        "--js",
        metavar="PATTERN",
        dest="js",
        help="js file(s) to inject (file or directory). Wildcards can be used with quotation: '**/*.js'",
    )
    g_ast.add_argument("-r", "--remove", metavar="CONDITION", dest="remove", help="Remove condition")
    g_ast.add_argument(
        "-H",
        "--hash",
        action="store_true",
        dest="hash",
        help="Inject git hash of current commit",
    )

    g_tag.add_argument(
        "-g",
        "--ignore",
        metavar="PATH",
        dest="ignore",
        help="Prefix to remove from the injected filenames",
    )
    g_tag.add_argument(
        "-e",
        "--etag",
        action="store_true",
        dest="etag",
        help='appends "?etag=fileHash" to every import (link, script) to avoid undesired caching in new deployments',
    )
    g_tag.add_argument(
        "-I",
        "--inline",
        action="store_true",
        dest="inline",
        help="Inline the input (js and css) and embed it in html",
    )
    g_tag.add_argument(
        "-A",
        "--async",
        action="store_true",
        dest="async_",
        help="Add async attribute to injected script tags (wins over --defer)",
    )
    g_tag.add_argument(
        "-D",
        "--defer",
        action="store_true",
        dest="defer",
        help="Add defer attribute to injected script tags",
    )

    g_misc.add_argument(
        "--json-logs",
        action="store_true",
        dest="json_logs",
        help="Emit log lines as JSON on stderr (also POSTBUILD_JSON_LOGS=1).",
    )
    g_misc.add_argument("-V", "--version", action="version", version=f"%(prog)s {version}".rstrip())

    return p
