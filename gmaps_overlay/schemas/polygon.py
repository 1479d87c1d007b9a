"""
Polygon Overlay Schema
======================

Bounded Context: Map Overlay Data Structures

This module defines the polygon overlay drawn on top of a map view.

Design:
- Mutable dataclass: the map widget edits overlays in place
- No validation: colors and opacities are passed through untouched
- Structural equality over geometry and fill/stroke styling only
- to_dict() / from_dict() with the camelCase names the map client reads

Equality:
    Two polygons are equal when their coordinates, fill_color,
    fill_opacity, stroke_color, stroke_opacity and stroke_weight match.
    z_index and geodesic do not take part in equality or hashing.
    Opacities compare by their IEEE-754 bit pattern, so NaN equals NaN
    and 0.0 differs from -0.0.
"""

import math
import struct
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from .common import LatLon

DEFAULT_FILL_COLOR = "#ffffff"
DEFAULT_STROKE_COLOR = "#000000"

_CANONICAL_NAN_BITS = 0x7FF8000000000000


def _float_bits(value: float) -> int:
    """Bit pattern of a double, with every NaN folded to one value."""
    if math.isnan(value):
        return _CANONICAL_NAN_BITS
    return struct.unpack('<q', struct.pack('<d', value))[0]


def _coordinate_key(coordinates: Optional[Sequence[LatLon]]) -> Optional[Tuple[LatLon, ...]]:
    """Comparable form of a coordinate sequence; None stays None."""
    if coordinates is None:
        return None
    return tuple(coordinates)


def _integral(value: Any, name: str) -> int:
    """Wire integer; whole-number floats are accepted, fractions and bools are not."""
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass(eq=False)
class MapPolygon:
    """
    Polygon overlay of a map widget.

    The coordinate sequence is closed by the renderer, so the last
    coordinate does not have to repeat the first one.

    Attributes:
        coordinates: Ordered boundary coordinates (None when unset)
        fill_color: Fill color (CSS hex string)
        fill_opacity: Fill opacity, conceptually in [0, 1]
        stroke_color: Stroke color (CSS hex string)
        stroke_opacity: Stroke opacity, conceptually in [0, 1]
        stroke_weight: Stroke width in pixels
        z_index: Stacking order relative to other polygons
        geodesic: Draw edges along great circles instead of straight lines

    Example:
        >>> harbour = MapPolygon(
        ...     [LatLon(60.44, 22.25), LatLon(60.45, 22.27), LatLon(60.43, 22.28)],
        ...     "#3366ff", 0.4, "#003399", 0.9, 2
        ... )
        >>> harbour.z_index = 3
        >>> harbour == MapPolygon(list(harbour.coordinates), "#3366ff", 0.4, "#003399", 0.9, 2)
        True
    """
    coordinates: List[LatLon] = field(default_factory=list)
    fill_color: str = DEFAULT_FILL_COLOR
    fill_opacity: float = 1.0
    stroke_color: str = DEFAULT_STROKE_COLOR
    stroke_opacity: float = 1.0
    stroke_weight: int = 1
    z_index: int = 0
    geodesic: bool = False

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, MapPolygon):
            return NotImplemented
        return (
            _coordinate_key(self.coordinates) == _coordinate_key(other.coordinates)
            and self.fill_color == other.fill_color
            and _float_bits(self.fill_opacity) == _float_bits(other.fill_opacity)
            and self.stroke_color == other.stroke_color
            and _float_bits(self.stroke_opacity) == _float_bits(other.stroke_opacity)
            and self.stroke_weight == other.stroke_weight
        )

    def __hash__(self) -> int:
        return hash((
            _coordinate_key(self.coordinates),
            self.fill_color,
            _float_bits(self.fill_opacity),
            self.stroke_color,
            _float_bits(self.stroke_opacity),
            self.stroke_weight,
        ))

    def __len__(self) -> int:
        if self.coordinates is None:
            return 0
        return len(self.coordinates)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict.

        Unset (None) coordinates serialize as null.
        """
        coordinates = None
        if self.coordinates is not None:
            coordinates = [coord.to_dict() for coord in self.coordinates]
        return {
            'coordinates': coordinates,
            'fillColor': self.fill_color,
            'fillOpacity': self.fill_opacity,
            'strokeColor': self.stroke_color,
            'strokeOpacity': self.stroke_opacity,
            'strokeWeight': self.stroke_weight,
            'zIndex': self.z_index,
            'geodesic': self.geodesic,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MapPolygon':
        """Deserialize from dict.

        Absent keys take the default values.

        Args:
            data: Dictionary with polygon fields (camelCase keys)

        Returns:
            MapPolygon instance

        Raises:
            ValueError: If data is not a mapping or holds malformed values
        """
        if not isinstance(data, dict):
            raise ValueError(f"Polygon data must be a mapping, got {type(data).__name__}")

        coordinates = data.get('coordinates', [])
        if coordinates is not None and not isinstance(coordinates, list):
            raise ValueError(
                f"Polygon coordinates must be a list, got {type(coordinates).__name__}"
            )

        geodesic = data.get('geodesic', False)
        if not isinstance(geodesic, bool):
            raise ValueError(f"geodesic must be a boolean, got {geodesic!r}")

        try:
            return cls(
                coordinates=(
                    None if coordinates is None
                    else [LatLon.from_dict(coord) for coord in coordinates]
                ),
                fill_color=data.get('fillColor', DEFAULT_FILL_COLOR),
                fill_opacity=float(data.get('fillOpacity', 1.0)),
                stroke_color=data.get('strokeColor', DEFAULT_STROKE_COLOR),
                stroke_opacity=float(data.get('strokeOpacity', 1.0)),
                stroke_weight=_integral(data.get('strokeWeight', 1), 'strokeWeight'),
                z_index=_integral(data.get('zIndex', 0), 'zIndex'),
                geodesic=geodesic
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid MapPolygon data: {e}")

    def vertices(self) -> np.ndarray:
        """Coordinates as an (N, 2) array of [latitude, longitude] rows."""
        return np.array(
            [[coord.latitude, coord.longitude] for coord in self.coordinates or ()],
            dtype=np.float64
        ).reshape(-1, 2)

    @classmethod
    def from_vertices(cls, vertices: np.ndarray, **style: Any) -> 'MapPolygon':
        """Build a polygon from an (N, 2) array of [latitude, longitude] rows.

        Args:
            vertices: Array-like of shape (N, 2)
            **style: Any other MapPolygon field by keyword

        Raises:
            ValueError: If vertices is not an (N, 2) array
        """
        array = np.asarray(vertices, dtype=np.float64)
        if array.size == 0:
            array = array.reshape(0, 2)
        if array.ndim != 2 or array.shape[1] != 2:
            raise ValueError(f"vertices must be Nx2 array, got shape {array.shape}")

        coordinates = [LatLon(float(lat), float(lon)) for lat, lon in array]
        return cls(coordinates=coordinates, **style)
