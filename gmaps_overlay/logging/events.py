"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: overlay, registry, config, error

Example Log Query (Loki):
    {app="gmaps-overlay"} | json | event = "overlay.deserialized"
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - overlay.*: Overlay (de)serialization
    - registry.*: Polygon registry changes
    - config.*: Configuration loading
    - error.*: Error conditions
    """

    # ========== Overlay Events ==========
    OVERLAY_SERIALIZED = "overlay.serialized"
    """Polygon or snapshot encoded to JSON."""

    OVERLAY_DESERIALIZED = "overlay.deserialized"
    """Polygon or snapshot decoded from JSON."""

    # ========== Registry Events ==========
    REGISTRY_POLYGON_ADDED = "registry.polygon.added"
    """Polygon added to the registry."""

    REGISTRY_POLYGON_UPDATED = "registry.polygon.updated"
    """Polygon replaced in the registry."""

    REGISTRY_POLYGON_REMOVED = "registry.polygon.removed"
    """Polygon removed from the registry."""

    REGISTRY_CLEARED = "registry.cleared"
    """All polygons removed from the registry."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Overlay configuration loaded from YAML."""

    # ========== Error Events ==========
    SERIALIZATION_ERROR = "error.serialization"
    """Failed to serialize overlay to JSON."""

    DESERIALIZATION_ERROR = "error.deserialization"
    """Payload is not valid JSON."""

    SCHEMA_VALIDATION_ERROR = "error.schema_validation"
    """Payload failed overlay schema validation."""

    CONFIG_ERROR = "error.config"
    """Configuration file missing or invalid."""
