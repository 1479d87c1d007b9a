"""
Configuration schema for map overlays.

This module loads polygon overlay definitions from YAML, including a
default style applied to every polygon that leaves a style key out, and
the logging settings of the overlay component.

Only the file structure is validated here. Colors, opacities and weights
are passed through to MapPolygon unchanged.
"""

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import yaml

from .logging import StructuredLogger, create_logger
from .registry import PolygonRegistry
from .schemas import LatLon, MapPolygon

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR"}


@dataclass(frozen=True)
class StyleConfig:
    """Polygon styling; None means "not set here"."""

    fill_color: Optional[str] = None
    fill_opacity: Optional[float] = None
    stroke_color: Optional[str] = None
    stroke_opacity: Optional[float] = None
    stroke_weight: Optional[int] = None
    z_index: Optional[int] = None
    geodesic: Optional[bool] = None

    def __post_init__(self):
        """Validate value types; ranges are not checked."""
        if self.geodesic is not None and not isinstance(self.geodesic, bool):
            raise ValueError(f"geodesic must be true or false, got {self.geodesic!r}")

        for name in ("stroke_weight", "z_index"):
            value = getattr(self, name)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ValueError(f"{name} must be an integer, got {value!r}")

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "StyleConfig":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ValueError(f"Style must be a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown style keys: {sorted(unknown)}. "
                f"Must be among {sorted(known)}"
            )
        return cls(**data)

    def merged_over(self, base: "StyleConfig") -> "StyleConfig":
        """Values set here win; unset ones come from base."""
        overrides = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
        return replace(base, **overrides)

    def as_kwargs(self) -> Dict[str, Any]:
        """Set values as MapPolygon keyword arguments."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class PolygonConfig:
    """One polygon overlay definition."""

    polygon_id: str
    coordinates: List[Tuple[float, float]]
    style: StyleConfig = field(default_factory=StyleConfig)

    def __post_init__(self):
        """Validate polygon definition."""
        if not self.polygon_id:
            raise ValueError("polygon_id cannot be empty")

        for index, coord in enumerate(self.coordinates):
            if len(coord) != 2:
                raise ValueError(
                    f"Polygon '{self.polygon_id}' coordinate {index} must be "
                    f"[latitude, longitude], got {list(coord)}"
                )

    def to_polygon(self, default_style: StyleConfig) -> MapPolygon:
        """Build the MapPolygon with default_style filling unset keys."""
        style = self.style.merged_over(default_style)
        return MapPolygon(
            coordinates=[LatLon(lat, lon) for lat, lon in self.coordinates],
            **style.as_kwargs()
        )


@dataclass(frozen=True)
class OverlayConfig:
    """
    Overlay configuration for one map widget.

    This configuration is loaded from YAML and validated at load time.
    Immutable after construction (frozen dataclass).
    """

    component: str = "map"
    log_level: str = "INFO"
    default_style: StyleConfig = field(default_factory=StyleConfig)
    polygons: List[PolygonConfig] = field(default_factory=list)

    def __post_init__(self):
        """Validate overlay configuration."""
        if not self.component:
            raise ValueError("component cannot be empty")

        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )

        seen = set()
        for polygon in self.polygons:
            if polygon.polygon_id in seen:
                raise ValueError(f"Duplicate polygon_id: '{polygon.polygon_id}'")
            seen.add(polygon.polygon_id)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "OverlayConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            component: "harbour_map"
            log_level: "INFO"

            default_style:
              fill_color: "#3366ff"
              fill_opacity: 0.35

            polygons:
              - polygon_id: "harbour"
                coordinates: [[60.44, 22.25], [60.45, 22.27], [60.43, 22.28]]
                stroke_weight: 2
                z_index: 1
                geodesic: true

        Raises:
            FileNotFoundError: If yaml_path doesn't exist
            ValueError: If YAML is invalid or the structure is wrong
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OverlayConfig":
        """Build configuration from an already-parsed mapping."""
        default_style = StyleConfig.from_dict(data.get("default_style"))

        polygon_entries = data.get("polygons") or []
        if not isinstance(polygon_entries, list):
            raise ValueError(
                f"polygons must be a list, got {type(polygon_entries).__name__}"
            )

        polygons = []
        for p in polygon_entries:
            if not isinstance(p, dict) or "polygon_id" not in p:
                raise ValueError(f"Polygon entry missing polygon_id: {p}")
            style_data = {
                key: value for key, value in p.items()
                if key not in ("polygon_id", "coordinates")
            }
            try:
                coordinates = [
                    tuple(float(value) for value in coord)
                    for coord in p.get("coordinates", [])
                ]
            except (TypeError, ValueError) as e:
                raise ValueError(
                    f"Polygon '{p['polygon_id']}' has invalid coordinates: {e}"
                )
            polygons.append(
                PolygonConfig(
                    polygon_id=str(p["polygon_id"]),
                    coordinates=coordinates,
                    style=StyleConfig.from_dict(style_data)
                )
            )

        return cls(
            component=data.get("component", "map"),
            log_level=str(data.get("log_level", "INFO")).upper(),
            default_style=default_style,
            polygons=polygons,
        )

    def create_logger(self) -> StructuredLogger:
        """Structured logger for this component at the configured level."""
        return create_logger(self.component, level=getattr(logging, self.log_level))

    def build_polygons(self) -> Dict[str, MapPolygon]:
        """Polygons keyed by id, in file order."""
        return {
            p.polygon_id: p.to_polygon(self.default_style)
            for p in self.polygons
        }

    def build_registry(self, logger: Optional[StructuredLogger] = None) -> PolygonRegistry:
        """Registry populated with every configured polygon."""
        registry = PolygonRegistry(logger=logger, name=self.component)
        registry.load(self.build_polygons())
        return registry
