"""
Overlay Schemas
===============

Bounded Context: Data Structures

Typed data structures for map overlays and their JSON wire form.

Design:
- LatLon and OverlaySnapshot are frozen dataclasses
- MapPolygon is mutable; the map widget edits it in place
- to_dict() for JSON serialization
- from_dict() for deserialization
- Schema versioning for evolution

Public API
----------
Common Types:
    LatLon: Geographic coordinate
    Timestamp: ISO 8601 timestamp wrapper

Overlay Types:
    MapPolygon: Polygon overlay value object
    OverlaySnapshot: Versioned collection of polygons

Example:
    >>> from gmaps_overlay.schemas import LatLon, MapPolygon
    >>> polygon = MapPolygon([LatLon(60.45, 22.26), LatLon(60.46, 22.27), LatLon(60.44, 22.28)])
    >>> polygon.fill_color
    '#ffffff'
"""

from .common import LatLon, Timestamp
from .polygon import MapPolygon, DEFAULT_FILL_COLOR, DEFAULT_STROKE_COLOR
from .snapshot import OverlaySnapshot, SCHEMA_VERSION

__all__ = [
    # Common types
    'LatLon',
    'Timestamp',
    # Overlay types
    'MapPolygon',
    'OverlaySnapshot',
    # Constants
    'DEFAULT_FILL_COLOR',
    'DEFAULT_STROKE_COLOR',
    'SCHEMA_VERSION',
]
