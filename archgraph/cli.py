# archgraph/cli.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .c4_fmt import mermaid_block
from .constants import MARKDOWN_TITLE_DEFAULT
from .diagrams.c4 import C4RenderConfig
from .errors import GraphError
from .graph import Graph
from .io import load_model
from .writer import write_md, write_text


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="archgraph",
        description=(
            "Render a Mermaid C4 context diagram for one element of a YAML/JSON "
            "architecture graph."
        ),
    )
    parser.add_argument(
        "model",
        type=Path,
        help="Graph model: a .yaml/.yml/.json file or a directory of YAML parts.",
    )
    parser.add_argument(
        "--id",
        dest="focal_id",
        type=str,
        default="",
        help="Dot-qualified id of the focal element (e.g. Shop.CartAPI).",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the diagram to this file instead of stdout.",
    )
    parser.add_argument(
        "--format",
        choices=("text", "markdown"),
        default="text",
        help="text: bare Mermaid source; markdown: titled ```mermaid block.",
    )
    parser.add_argument(
        "--title",
        type=str,
        default=None,
        help=f"Markdown title (default: {MARKDOWN_TITLE_DEFAULT!r}).",
    )
    parser.add_argument(
        "--include-elements",
        action="store_true",
        help="Also declare the focal element and its linked elements.",
    )
    parser.add_argument(
        "--list-ids",
        action="store_true",
        help="Print every element id (depth-first) and exit.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entrypoint."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        graph = Graph(load_model(args.model))

        if args.list_ids:
            for element in graph.iter_elements():
                print(element.id)
            return

        if not args.focal_id:
            parser.error("--id is required unless --list-ids is given")

        cfg = C4RenderConfig(include_elements=args.include_elements)
        diagram_code = graph.c4_diagram(args.focal_id, cfg)
    except (GraphError, OSError, TypeError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        raise SystemExit(2) from e

    title = args.title or MARKDOWN_TITLE_DEFAULT.format(focal_id=args.focal_id)
    out: Optional[Path] = args.out

    if out is None:
        if args.format == "markdown":
            sys.stdout.write(f"# {title}\n\n{mermaid_block(diagram_code)}")
        else:
            print(diagram_code)
        return

    if args.format == "markdown":
        write_md(out, title, diagram_code)
    else:
        write_text(out, diagram_code)
