"""
gmaps_overlay - Map Overlay Package
===================================

Bounded Context: Polygon Overlays for a Map Widget

This package holds the polygon overlays a host application shows on a
map widget, and carries them to the map client as JSON.

Architecture:
- schemas/: LatLon, MapPolygon and OverlaySnapshot data structures
- codec: JSON wire format with structured error reporting
- registry: Thread-safe owner of a widget's polygons, in draw order
- config: YAML overlay definitions
- logging/: Structured JSON logging

Public API
----------
Schemas:
    LatLon, Timestamp, MapPolygon, OverlaySnapshot

Codec:
    OverlayCodec, CodecError
    encode_polygon, decode_polygon, encode_snapshot, decode_snapshot

Registry:
    PolygonRegistry

Config:
    OverlayConfig, PolygonConfig, StyleConfig

Logging:
    LogEvent, StructuredLogger, create_logger

Example:
    >>> from gmaps_overlay import LatLon, MapPolygon, PolygonRegistry, encode_snapshot
    >>>
    >>> registry = PolygonRegistry()
    >>> registry.add("harbour", MapPolygon(
    ...     [LatLon(60.44, 22.25), LatLon(60.45, 22.27), LatLon(60.43, 22.28)],
    ...     "#3366ff", 0.4, "#003399", 0.9, 2
    ... ))
    >>> payload = encode_snapshot(registry.snapshot())
"""

__version__ = "1.0.0"

from .schemas import (
    LatLon,
    Timestamp,
    MapPolygon,
    OverlaySnapshot,
    SCHEMA_VERSION,
)

from .codec import (
    OverlayCodec,
    CodecError,
    encode_polygon,
    decode_polygon,
    encode_snapshot,
    decode_snapshot,
)

from .registry import PolygonRegistry

from .config import OverlayConfig, PolygonConfig, StyleConfig

from .logging import (
    LogEvent,
    StructuredLogger,
    create_logger,
)

__all__ = [
    '__version__',
    # Schemas
    'LatLon',
    'Timestamp',
    'MapPolygon',
    'OverlaySnapshot',
    'SCHEMA_VERSION',
    # Codec
    'OverlayCodec',
    'CodecError',
    'encode_polygon',
    'decode_polygon',
    'encode_snapshot',
    'decode_snapshot',
    # Registry
    'PolygonRegistry',
    # Config
    'OverlayConfig',
    'PolygonConfig',
    'StyleConfig',
    # Logging
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
