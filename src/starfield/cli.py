"""CLI entry point: Bright Star Catalog → starfield.glb.

    uv run starfield --preview results/starfield.png
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from starfield.catalog import (
    CatalogAcquisitionError,
    ensure_catalog,
    parse,
    read_catalog,
)
from starfield.config import load_settings
from starfield.palette import build_palette
from starfield.renderers.static import save_preview_chart
from starfield.scene import assemble, save_glb


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parses command-line arguments. Defaults come from the environment."""
    settings = load_settings()
    parser = argparse.ArgumentParser(
        description="Convert the Yale Bright Star Catalog into a glTF starfield"
    )
    parser.add_argument(
        "-d", "--data-dir",
        type=Path,
        default=settings.data_dir,
        help=f"Directory for bsc5.dat (default: {settings.data_dir})",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=settings.output_path,
        help=f"Output .glb file (default: {settings.output_path})",
    )
    parser.add_argument(
        "-p", "--preview",
        type=Path,
        default=None,
        help="Also save a PNG preview of the catalog to this path",
    )
    parser.add_argument(
        "--url",
        default=settings.catalog_url,
        help="Download location of bsc5.dat.gz",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog_path = ensure_catalog(args.data_dir, args.url)
        raw_text = read_catalog(catalog_path)
    except CatalogAcquisitionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    palette = build_palette()
    entries = parse(raw_text)
    document = assemble(entries, palette)
    path = save_glb(document, args.output)
    print(f"Saved: {path}")

    if args.preview is not None:
        preview = save_preview_chart(entries, palette, args.preview)
        print(f"Saved: {preview}")

    print(f"Converted {len(entries)} entries.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
