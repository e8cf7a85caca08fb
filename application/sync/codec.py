"""
Snapshot codec: raw payloads and JSON text to and from Snapshot models.

The version is checked before structural validation, so a payload from a
future major version fails as unsupported rather than as malformed.

Two parsing depths are offered. parse_snapshot validates every record and is
all-or-nothing. parse_envelope only validates the envelope; the importer then
calls validate_record on each item just before writing it, so one malformed
record fails on its own.
"""

import json
import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import TypeAdapter, ValidationError

from application.exceptions import SnapshotFormatError, UnsupportedVersionError
from domain.models.categories import SyncCategory
from domain.models.snapshot import (
    RECORD_TYPES,
    SUPPORTED_MAJOR_VERSIONS,
    Snapshot,
    SnapshotEnvelope,
    is_supported_version,
)

logger = logging.getLogger(__name__)

_RECORD_ADAPTERS: Dict[SyncCategory, TypeAdapter] = {
    category: TypeAdapter(record_type) for category, record_type in RECORD_TYPES.items()
}


def ensure_supported_version(version: Any) -> None:
    """Raise UnsupportedVersionError unless the version's major is importable."""
    if not is_supported_version(version):
        raise UnsupportedVersionError(version, SUPPORTED_MAJOR_VERSIONS)


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one readable line."""
    parts = []
    for detail in error.errors(include_url=False):
        location = ".".join(str(part) for part in detail["loc"])
        parts.append(f"{location}: {detail['msg']}" if location else detail["msg"])
    return "; ".join(parts)


def _validate(model: type, payload: Any) -> Any:
    if not isinstance(payload, Mapping):
        raise SnapshotFormatError(
            f"Snapshot payload must be an object, got {type(payload).__name__}"
        )

    ensure_supported_version(payload.get("version"))

    try:
        return model.model_validate(dict(payload))
    except ValidationError as e:
        logger.warning("Snapshot payload failed validation: %d error(s)", e.error_count())
        raise SnapshotFormatError(
            f"Invalid snapshot payload: {e.error_count()} validation error(s)",
            cause=e,
            context={"errors": e.errors(include_url=False)},
        ) from e


def parse_envelope(payload: Any) -> SnapshotEnvelope:
    """
    Validate the version and envelope of a snapshot, leaving records raw.

    A Snapshot or SnapshotEnvelope is returned as is after the version check.

    Raises:
        UnsupportedVersionError: Missing, unparseable or unsupported version
        SnapshotFormatError: Bad timestamp, or a category that is not an array
    """
    if isinstance(payload, SnapshotEnvelope):
        ensure_supported_version(payload.version)
        return payload
    return _validate(SnapshotEnvelope, payload)


def parse_snapshot(payload: Mapping[str, Any]) -> Snapshot:
    """
    Validate a raw (already decoded) snapshot payload.

    Args:
        payload: Mapping with camelCase or snake_case keys

    Returns:
        The parsed Snapshot

    Raises:
        UnsupportedVersionError: Missing, unparseable or unsupported version
        SnapshotFormatError: Payload (or any record in it) is structurally invalid
    """
    if isinstance(payload, Snapshot):
        ensure_supported_version(payload.version)
        return payload
    return _validate(Snapshot, payload)


def validate_record(category: SyncCategory, item: Any) -> Any:
    """
    Turn one raw category item into its entity model.

    Items that are already models are returned unchanged.

    Raises:
        ValidationError: The item does not match the category's record type
    """
    return _RECORD_ADAPTERS[SyncCategory(category)].validate_python(item)


def load_snapshot(text: str) -> Snapshot:
    """Decode JSON text and parse it as a snapshot."""
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotFormatError(f"Snapshot is not valid JSON: {e.msg}", cause=e) from e
    return parse_snapshot(payload)


def dump_snapshot(snapshot: Snapshot, indent: Optional[int] = 2) -> str:
    """Encode a snapshot as JSON text in wire (camelCase) form."""
    return snapshot.to_json(indent=indent)
