"""
Command line entry point for animate-library.
Usage: python -m animate_library EXPORT.json [--strict] [--dump-meta] [--shapes-out FILE]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .settings import AppSettings
from .library import Library, LibraryError
from .utils.data_utils import readable_shapes, stringify_simple, to_precision
from .utils.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="animate_library",
        description="Build the asset library of an exported animation and report its contents.",
    )
    parser.add_argument(
        "export",
        type=Path,
        nargs="?",
        help="Path to the exported JSON file (defaults to the last one loaded).",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on duplicate asset ids instead of keeping the last one.",
    )
    parser.add_argument(
        "--dump-meta",
        action="store_true",
        help="Print the export's build settings.",
    )
    parser.add_argument(
        "--shapes-out",
        type=Path,
        help="Write every shape's paths, keyed by shape name, to this file.",
    )
    parser.add_argument(
        "--profile",
        default="default",
        help="Settings profile to use.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    settings = AppSettings(profile=args.profile)
    setup_logging(settings)
    logger = logging.getLogger(f"{__name__}.main")

    if settings.is_first_run:
        logger.info(f"First run, settings stored at {settings.get_settings_file_path()}")
        settings.set_first_run_complete()

    validation = settings.validate()
    for warning in validation.warnings:
        logger.warning(f"  {warning}")
    if not validation.is_valid:
        logger.error("Configuration validation failed:")
        for error in validation.errors:
            logger.error(f"  {error}")
        return 1

    export_path: Optional[Path] = args.export or settings.last_export_path
    if export_path is None:
        logger.error("No export file given and no previous export remembered")
        return 1

    strict = args.strict or settings.strict_asset_ids
    try:
        library = Library.from_file(export_path, strict_ids=strict)
    except LibraryError as e:
        logger.error(f"Failed to build library from {export_path}: {e}")
        return 1

    settings.last_export_path = export_path.resolve()

    summary = library.summary()
    logger.info(
        f"{export_path.name}: {summary['bitmaps']} bitmaps, {summary['shapes']} shapes, "
        f"{summary['texts']} texts, {summary['timelines']} timelines"
    )
    if summary["stage"] is None:
        logger.warning("Export has no stage timeline")
    else:
        framerate = to_precision(float(library.stage.framerate), settings.precision_places)
        logger.info(
            f"Stage asset: {summary['stage']} at {framerate} fps "
            f"(containers: {summary['has_container']})"
        )

    if args.dump_meta:
        print(stringify_simple(library.meta))

    if args.shapes_out:
        shapes = {shape.name: shape.paths for shape in library.shapes}
        args.shapes_out.write_text(readable_shapes(shapes), encoding="utf-8")
        logger.info(f"Wrote {len(shapes)} shapes to {args.shapes_out}")

    library.teardown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
