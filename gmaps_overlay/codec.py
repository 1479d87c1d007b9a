"""
Overlay JSON Codec
==================

Bounded Context: Overlay Wire Format

Encodes polygons and overlay snapshots to the JSON the map client reads,
and decodes them back.

Design:
- Schemas own the dict shape (to_dict / from_dict)
- The codec owns JSON text and error reporting
- Every failure is logged as a structured event, then raised as CodecError

Example:
    >>> codec = OverlayCodec(create_logger("codec"))
    >>> text = codec.encode_polygon(polygon)
    >>> codec.decode_polygon(text) == polygon
    True
"""

import json
from typing import Any, Dict, Optional

from .logging import StructuredLogger, LogEvent, create_logger
from .schemas import MapPolygon, OverlaySnapshot, SCHEMA_VERSION


class CodecError(ValueError):
    """Raised when an overlay cannot be encoded or decoded."""
    pass


class OverlayCodec:
    """
    JSON encoder/decoder for overlay schemas.

    Attributes:
        logger: Structured logger, bound to the codec's wire format
        indent: JSON indentation (None for compact output)
    """

    def __init__(self, logger: StructuredLogger, indent: Optional[int] = None):
        self.logger = logger.bind(codec="json", schema_version=SCHEMA_VERSION)
        self.indent = indent

    def _dumps(self, data: Dict[str, Any], kind: str) -> str:
        try:
            text = json.dumps(data, indent=self.indent)
        except (TypeError, ValueError) as e:
            self.logger.error(
                event=LogEvent.SERIALIZATION_ERROR,
                message=f"Failed to serialize {kind}",
                exc_info=e
            )
            raise CodecError(f"Cannot serialize {kind}: {e}") from e

        self.logger.info(
            event=LogEvent.OVERLAY_SERIALIZED,
            message=f"Serialized {kind}",
            metadata={'bytes': len(text)}
        )
        return text

    def _loads(self, text: str, kind: str) -> Any:
        try:
            return json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            self.logger.error(
                event=LogEvent.DESERIALIZATION_ERROR,
                message=f"Failed to decode {kind} JSON",
                exc_info=e
            )
            raise CodecError(f"Invalid {kind} JSON: {e}") from e

    def encode_polygon(self, polygon: MapPolygon) -> str:
        """Encode a single polygon to JSON text."""
        return self._dumps(polygon.to_dict(), "polygon")

    def decode_polygon(self, text: str) -> MapPolygon:
        """Decode a single polygon from JSON text.

        Raises:
            CodecError: If text is not JSON or not a polygon
        """
        data = self._loads(text, "polygon")
        try:
            polygon = MapPolygon.from_dict(data)
        except ValueError as e:
            self.logger.error(
                event=LogEvent.SCHEMA_VALIDATION_ERROR,
                message="Polygon failed schema validation",
                exc_info=e
            )
            raise CodecError(str(e)) from e

        self.logger.info(
            event=LogEvent.OVERLAY_DESERIALIZED,
            message="Deserialized polygon",
            metadata={'vertex_count': len(polygon)}
        )
        return polygon

    def encode_snapshot(self, snapshot: OverlaySnapshot) -> str:
        """Encode an overlay snapshot to JSON text."""
        return self._dumps(snapshot.to_dict(), "snapshot")

    def decode_snapshot(self, text: str) -> OverlaySnapshot:
        """Decode an overlay snapshot from JSON text.

        Raises:
            CodecError: If text is not JSON, not a snapshot, or carries an
                unsupported schema major version
        """
        data = self._loads(text, "snapshot")
        try:
            snapshot = OverlaySnapshot.from_dict(data)
        except ValueError as e:
            self.logger.error(
                event=LogEvent.SCHEMA_VALIDATION_ERROR,
                message="Snapshot failed schema validation",
                exc_info=e
            )
            raise CodecError(str(e)) from e

        supported_major = SCHEMA_VERSION.split('.', 1)[0]
        if snapshot.major_version != supported_major:
            self.logger.error(
                event=LogEvent.SCHEMA_VALIDATION_ERROR,
                message="Unsupported snapshot schema version",
                metadata={
                    'schema_version': snapshot.schema_version,
                    'supported': SCHEMA_VERSION
                }
            )
            raise CodecError(
                f"Unsupported schema_version {snapshot.schema_version}, "
                f"expected {supported_major}.x"
            )

        self.logger.info(
            event=LogEvent.OVERLAY_DESERIALIZED,
            message="Deserialized snapshot",
            metadata={
                'schema_version': snapshot.schema_version,
                'polygon_count': snapshot.polygon_count
            }
        )
        return snapshot


_default_codec: Optional[OverlayCodec] = None


def _codec() -> OverlayCodec:
    global _default_codec
    if _default_codec is None:
        _default_codec = OverlayCodec(create_logger("codec"))
    return _default_codec


def encode_polygon(polygon: MapPolygon) -> str:
    """Encode a polygon with the module-level codec."""
    return _codec().encode_polygon(polygon)


def decode_polygon(text: str) -> MapPolygon:
    """Decode a polygon with the module-level codec."""
    return _codec().decode_polygon(text)


def encode_snapshot(snapshot: OverlaySnapshot) -> str:
    """Encode a snapshot with the module-level codec."""
    return _codec().encode_snapshot(snapshot)


def decode_snapshot(text: str) -> OverlaySnapshot:
    """Decode a snapshot with the module-level codec."""
    return _codec().decode_snapshot(text)
