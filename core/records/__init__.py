# Path: core/records/__init__.py
# Purpose: Package initializer for sidecar parsing and serialization.
# Layer: core/records.
# Details: Exposes the parser, the serializer, and filename helpers.

from .naming import file_format_for, metadata_file_name, strip_metadata_suffix, year_from_directory
from .parser import ParseResult, Skip, normalize_deliveries, parse_sermon, record_from_payload
from .serializer import serialize_sermon

__all__ = [
    "ParseResult",
    "Skip",
    "file_format_for",
    "metadata_file_name",
    "normalize_deliveries",
    "parse_sermon",
    "record_from_payload",
    "serialize_sermon",
    "strip_metadata_suffix",
    "year_from_directory",
]
