"""
Polygon Registry - Thread-safe overlay collection.

This module provides the PolygonRegistry class, the owner of the polygons
shown by one map widget. Polygons are keyed by a string id and handed to
the client in draw order.

Draw Order:
- Ascending z_index: lowest is drawn first, highest ends on top
- Equal z_index: insertion order

Thread Safety:
- threading.Lock protects the polygon dict
- Snapshot pattern: copy under the lock, sort/serialize outside it
- Polygons themselves are not locked; callers that mutate a registered
  polygon from several threads synchronize on their own
"""

import threading
from typing import Dict, List, Mapping, Optional

from .logging import StructuredLogger, LogEvent
from .schemas import MapPolygon, OverlaySnapshot, Timestamp, SCHEMA_VERSION


class PolygonRegistry:
    """
    Thread-safe registry of polygon overlays.

    Usage:
        registry = PolygonRegistry()
        registry.add("harbour", MapPolygon(harbour_coords, z_index=1))
        registry.add("old_town", MapPolygon(old_town_coords))

        for polygon in registry.draw_order():
            ...  # old_town first, harbour on top

        snapshot = registry.snapshot()
    """

    def __init__(self, logger: Optional[StructuredLogger] = None, name: str = "default"):
        """Initialize empty registry.

        Args:
            logger: Structured logger for registry changes (optional)
            name: Registry name, bound into every log entry
        """
        self.name = name
        self._polygons: Dict[str, MapPolygon] = {}
        self._lock = threading.Lock()
        self.logger = logger.bind(registry=name) if logger is not None else None

    def _log(self, event: LogEvent, message: str, polygon_id: Optional[str] = None) -> None:
        if self.logger is None:
            return
        metadata = {'polygon_id': polygon_id} if polygon_id is not None else None
        self.logger.info(event=event, message=message, metadata=metadata)

    def add(self, polygon_id: str, polygon: MapPolygon) -> None:
        """
        Add a polygon to the registry.

        Raises:
            ValueError: If polygon_id is empty or already exists
        """
        if not polygon_id:
            raise ValueError("polygon_id cannot be empty")

        with self._lock:
            if polygon_id in self._polygons:
                raise ValueError(f"Polygon '{polygon_id}' already exists")
            self._polygons[polygon_id] = polygon

        self._log(LogEvent.REGISTRY_POLYGON_ADDED, "Added polygon", polygon_id)

    def load(self, polygons: Mapping[str, MapPolygon]) -> None:
        """
        Add several polygons, in mapping order.

        Raises:
            ValueError: On the first empty or duplicate id; polygons added
                before it stay registered
        """
        for polygon_id, polygon in polygons.items():
            self.add(polygon_id, polygon)

    def update(self, polygon_id: str, polygon: MapPolygon) -> None:
        """
        Replace a registered polygon, keeping its insertion position.

        Raises:
            KeyError: If polygon_id does not exist
        """
        with self._lock:
            if polygon_id not in self._polygons:
                raise KeyError(f"Polygon '{polygon_id}' not found")
            self._polygons[polygon_id] = polygon

        self._log(LogEvent.REGISTRY_POLYGON_UPDATED, "Updated polygon", polygon_id)

    def remove(self, polygon_id: str) -> MapPolygon:
        """
        Remove a polygon from the registry.

        Returns:
            The removed polygon

        Raises:
            KeyError: If polygon_id does not exist
        """
        with self._lock:
            if polygon_id not in self._polygons:
                raise KeyError(f"Polygon '{polygon_id}' not found")
            polygon = self._polygons.pop(polygon_id)

        self._log(LogEvent.REGISTRY_POLYGON_REMOVED, "Removed polygon", polygon_id)
        return polygon

    def get(self, polygon_id: str) -> MapPolygon:
        """
        Get a registered polygon.

        Raises:
            KeyError: If polygon_id does not exist
        """
        with self._lock:
            if polygon_id not in self._polygons:
                raise KeyError(f"Polygon '{polygon_id}' not found")
            return self._polygons[polygon_id]

    def contains(self, polygon_id: str) -> bool:
        """Check if polygon_id is registered."""
        with self._lock:
            return polygon_id in self._polygons

    def list_ids(self) -> List[str]:
        """Registered ids in insertion order."""
        with self._lock:
            return list(self._polygons)

    def draw_order(self) -> List[MapPolygon]:
        """
        Polygons from bottom-most to top-most.

        sorted() is stable, so equal z_index keeps insertion order.
        """
        with self._lock:
            polygons = list(self._polygons.values())
        return sorted(polygons, key=lambda polygon: polygon.z_index)

    def snapshot(self) -> OverlaySnapshot:
        """Current polygons in draw order, wrapped for the wire."""
        return OverlaySnapshot(
            schema_version=SCHEMA_VERSION,
            timestamp=Timestamp.now(),
            polygons=self.draw_order()
        )

    def clear(self) -> None:
        """Remove all polygons."""
        with self._lock:
            self._polygons.clear()

        self._log(LogEvent.REGISTRY_CLEARED, "Cleared registry")

    def count(self) -> int:
        """Number of registered polygons."""
        with self._lock:
            return len(self._polygons)
