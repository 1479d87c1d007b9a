"""
Overlay Snapshot Schema
=======================

Bounded Context: Overlay Collection Transfer

An OverlaySnapshot carries every polygon of a map widget in draw order,
so the client can rebuild the overlay layer in one step.

Message Flow:
    PolygonRegistry → OverlaySnapshot → codec (JSON) → map client
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .common import Timestamp
from .polygon import MapPolygon

SCHEMA_VERSION = "1.0"


@dataclass(frozen=True)
class OverlaySnapshot:
    """
    Versioned envelope for a collection of polygon overlays.

    Attributes:
        schema_version: Message schema version (for evolution)
        timestamp: ISO 8601 timestamp of snapshot creation
        polygons: Polygons ordered from bottom-most to top-most

    Example:
        >>> snapshot = OverlaySnapshot(
        ...     schema_version="1.0",
        ...     timestamp=Timestamp.now(),
        ...     polygons=[harbour, old_town]
        ... )
        >>> snapshot.polygon_count
        2
    """
    schema_version: str
    timestamp: Timestamp
    polygons: List[MapPolygon] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'schema_version': self.schema_version,
            'timestamp': self.timestamp.to_dict(),
            'polygons': [polygon.to_dict() for polygon in self.polygons]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'OverlaySnapshot':
        """Deserialize from dict.

        Raises:
            ValueError: If required fields missing or invalid
        """
        try:
            polygons = data.get('polygons', [])
            if not isinstance(polygons, list):
                raise ValueError("polygons must be a list")
            return cls(
                schema_version=str(data['schema_version']),
                timestamp=Timestamp(value=str(data['timestamp'])),
                polygons=[MapPolygon.from_dict(polygon) for polygon in polygons]
            )
        except KeyError as e:
            raise ValueError(f"Missing required OverlaySnapshot field: {e}")
        except (TypeError, AttributeError) as e:
            raise ValueError(f"Invalid OverlaySnapshot data: {e}")

    @property
    def polygon_count(self) -> int:
        """Number of polygons in this snapshot."""
        return len(self.polygons)

    @property
    def major_version(self) -> str:
        """Major part of schema_version ("1" for "1.0")."""
        return self.schema_version.split('.', 1)[0]
