"""
Common Schema Types
==================

Bounded Context: Shared Data Structures

This module defines the small value types shared by overlay schemas.

Design Principles:
- Immutability: frozen=True makes coordinates hashable
- Permissive: no range checks on latitude/longitude
- Serialization: to_dict() for JSON export

Types:
- LatLon: Geographic coordinate (degrees)
- Timestamp: ISO 8601 timestamp wrapper
"""

from dataclasses import dataclass, asdict
from datetime import datetime, timezone
from typing import Any, Dict


@dataclass(frozen=True)
class LatLon:
    """
    Immutable geographic coordinate.

    Attributes:
        latitude: Latitude in degrees
        longitude: Longitude in degrees

    Example:
        >>> point = LatLon(latitude=60.4518, longitude=22.2666)
        >>> point.to_dict()
        {'latitude': 60.4518, 'longitude': 22.2666}
    """
    latitude: float = 0.0
    longitude: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        """Serialize to JSON-compatible dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> 'LatLon':
        """Deserialize from a dict or a ``[lat, lon]`` pair.

        Args:
            data: Dictionary with keys latitude, longitude, or a
                two-element sequence

        Returns:
            LatLon instance

        Raises:
            ValueError: If keys are missing or values are not numbers
        """
        try:
            if isinstance(data, dict):
                return cls(
                    latitude=float(data['latitude']),
                    longitude=float(data['longitude'])
                )
            if isinstance(data, (list, tuple)) and len(data) == 2:
                return cls(latitude=float(data[0]), longitude=float(data[1]))
        except KeyError as e:
            raise ValueError(f"Missing required LatLon field: {e}")
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid LatLon data: {e}")
        raise ValueError(f"Invalid LatLon data: {data!r}")


@dataclass(frozen=True)
class Timestamp:
    """
    Immutable ISO 8601 timestamp wrapper.

    Attributes:
        value: ISO 8601 formatted timestamp string

    Example:
        >>> ts = Timestamp.now()
        >>> ts.value
        '2026-10-19T15:30:45.123456+00:00'
    """
    value: str

    @classmethod
    def now(cls) -> 'Timestamp':
        """Create timestamp from current UTC time."""
        return cls(value=datetime.now(timezone.utc).isoformat())

    def to_datetime(self) -> datetime:
        """Parse to datetime object.

        Raises:
            ValueError: If timestamp format invalid
        """
        try:
            return datetime.fromisoformat(self.value)
        except ValueError as e:
            raise ValueError(f"Invalid ISO timestamp: {self.value}") from e

    def to_dict(self) -> str:
        """Serialize to JSON (as string)."""
        return self.value
