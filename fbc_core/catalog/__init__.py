"""Declarative catalog normalization pipeline."""

from .diagnostics import DiagnosticSink
from .errors import CatalogDecodeError, CatalogError, CatalogIOError
from .indexer import build_catalog_index
from .models import CatalogMeta, CatalogRecord, ChannelEntry, Property, RelatedImage
from .normalizer import normalize_catalog_text, normalize_catalogs, render_record, write_record
from .reader import (
    decode_catalog_document,
    iter_catalog_files,
    list_packages,
    load_document,
    load_json,
    read_catalog_record,
)
from .repair import PLACEHOLDER_VALUE, repair_property_values, repair_property_values_counted
from .splitter import get_splitter, split_catalog_blob, split_catalog_blob_by_depth
from .types import (
    DEFAULT_CATALOG_FILENAMES,
    DEFAULT_OUTPUT_DIRNAME,
    CatalogConfig,
    Diagnostic,
    NormalizeReport,
)
from .values import Value, decode_property_value

__all__ = [
    "CatalogConfig",
    "CatalogDecodeError",
    "CatalogError",
    "CatalogIOError",
    "CatalogMeta",
    "CatalogRecord",
    "ChannelEntry",
    "DEFAULT_CATALOG_FILENAMES",
    "DEFAULT_OUTPUT_DIRNAME",
    "Diagnostic",
    "DiagnosticSink",
    "NormalizeReport",
    "PLACEHOLDER_VALUE",
    "Property",
    "RelatedImage",
    "Value",
    "build_catalog_index",
    "decode_catalog_document",
    "decode_property_value",
    "get_splitter",
    "iter_catalog_files",
    "list_packages",
    "load_document",
    "load_json",
    "normalize_catalog_text",
    "normalize_catalogs",
    "read_catalog_record",
    "render_record",
    "repair_property_values",
    "repair_property_values_counted",
    "split_catalog_blob",
    "split_catalog_blob_by_depth",
    "write_record",
]
