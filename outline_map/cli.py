"""Command line entry point for resolving an exported outline tree."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Iterable, Optional

from .config import LAYER_STYLE, MAPBOX_CONFIG
from .core import OutlineNode, TreeFormatError
from .pipelines import LayerPipeline
from .render import render_layer
from .utils import ensure_directory, load_json

LOGGER = logging.getLogger(__name__)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve the ROUTE and PLACES sections of an outline tree into map layer JSON."
    )
    parser.add_argument("tree", type=Path, help="Path to the exported outline tree (JSON)")
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the rendered layer to this file instead of stdout",
    )
    parser.add_argument(
        "--token",
        default=None,
        help="Mapbox access token (defaults to OUTLINE_MAP_MAPBOX_TOKEN)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=MAPBOX_CONFIG.geocode_workers,
        help="Number of concurrent geocoding requests (default: %(default)s)",
    )
    parser.add_argument(
        "--padding",
        type=int,
        default=LAYER_STYLE.fit_padding[0],
        help="Viewport padding in screen pixels (default: %(default)s)",
    )
    return parser


def main(argv: Optional[Iterable[str]] = None, *, pipeline: Optional[LayerPipeline] = None) -> int:
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    try:
        tree = OutlineNode.from_dict(load_json(args.tree))
    except (OSError, ValueError) as error:
        LOGGER.error("Unable to read %s: %s", args.tree, error)
        return 1
    except TreeFormatError as error:
        LOGGER.error("%s", error)
        return 1

    if pipeline is None:
        config = replace(MAPBOX_CONFIG, geocode_workers=args.workers)
        pipeline = LayerPipeline.default(config, access_token=args.token)

    style = replace(LAYER_STYLE, fit_padding=(args.padding, args.padding))
    snapshot = pipeline.resolve(tree, layer_id=args.tree.stem)
    document = json.dumps(render_layer(snapshot, style).as_dict(), indent=2)

    if args.output:
        ensure_directory(args.output.parent)
        args.output.write_text(document + "\n", encoding="utf-8")
        LOGGER.info("Wrote map layer to %s", args.output)
    else:
        sys.stdout.write(document + "\n")
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
