"""File I/O related utilities.

Small modules that primarily deal with formatting file-backed diagnostics.
"""

from .source_location import SourceLocation, lookup_source, format_source, pointer_to_yaml_path

__all__ = [
    "SourceLocation",
    "lookup_source",
    "format_source",
    "pointer_to_yaml_path",
]
