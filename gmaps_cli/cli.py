"""
gmaps-overlay CLI - Main entry point.

Exports YAML overlay definitions as snapshot JSON for the map client, and
summarizes existing snapshot files.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from gmaps_overlay import OverlayCodec, OverlayConfig, OverlaySnapshot, create_logger
from gmaps_overlay.logging import LogEvent


def export_config(config_path: str, output: Optional[str] = None, indent: Optional[int] = None) -> str:
    """
    Load a YAML overlay config and encode it as snapshot JSON.

    Args:
        config_path: Path to overlay YAML
        output: File to write; None returns the text only
        indent: JSON indentation

    Returns:
        Snapshot JSON text

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config is invalid
    """
    config = OverlayConfig.from_yaml(Path(config_path))
    logger = config.create_logger()
    logger.info(
        event=LogEvent.CONFIG_LOADED,
        message="Loaded overlay config",
        metadata={'path': str(config_path), 'polygon_count': len(config.polygons)}
    )

    registry = config.build_registry(logger=logger)
    text = OverlayCodec(logger, indent=indent).encode_snapshot(registry.snapshot())

    if output:
        Path(output).write_text(text + "\n")
    return text


def describe_snapshot(snapshot: OverlaySnapshot) -> List[str]:
    """One summary line per polygon, bottom-most first."""
    lines = [
        f"schema {snapshot.schema_version} @ {snapshot.timestamp.value}: "
        f"{snapshot.polygon_count} polygon(s)"
    ]
    for index, polygon in enumerate(snapshot.polygons):
        lines.append(
            f"  [{index}] vertices={len(polygon)} z={polygon.z_index} "
            f"fill={polygon.fill_color}/{polygon.fill_opacity} "
            f"stroke={polygon.stroke_color}/{polygon.stroke_opacity}/{polygon.stroke_weight}"
            f"{' geodesic' if polygon.geodesic else ''}"
        )
    return lines


def inspect_snapshot(snapshot_path: str) -> List[str]:
    """
    Decode a snapshot JSON file and summarize it.

    Raises:
        FileNotFoundError: If snapshot file doesn't exist
        CodecError: If the file is not a valid snapshot
    """
    path = Path(snapshot_path)
    if not path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {snapshot_path}")

    codec = OverlayCodec(create_logger("cli"))
    return describe_snapshot(codec.decode_snapshot(path.read_text()))


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="gmaps-overlay",
        description="gmaps-overlay CLI - Export and inspect map polygon overlays",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Export YAML overlays as snapshot JSON
  gmaps-overlay export config/overlays.yaml -o overlays.json --indent 2

  # Summarize a snapshot
  gmaps-overlay inspect overlays.json
"""
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    export = subparsers.add_parser('export', help='Export YAML overlays as snapshot JSON')
    export.add_argument('config', help='Path to overlay config YAML')
    export.add_argument('-o', '--output', help='Output file (default: stdout)')
    export.add_argument('--indent', type=int, default=None, help='JSON indentation')

    inspect = subparsers.add_parser('inspect', help='Summarize a snapshot JSON file')
    inspect.add_argument('snapshot', help='Path to snapshot JSON')

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == 'export':
            text = export_config(args.config, args.output, args.indent)
            if not args.output:
                print(text)

        elif args.command == 'inspect':
            for line in inspect_snapshot(args.snapshot):
                print(line)

    except (OSError, ValueError) as e:
        failure_event = (
            LogEvent.CONFIG_ERROR if args.command == 'export'
            else LogEvent.DESERIALIZATION_ERROR
        )
        create_logger("cli").error(
            event=failure_event,
            message=f"{args.command} failed",
            exc_info=e
        )
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
