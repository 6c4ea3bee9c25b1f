"""Classification vocabulary public surface.

This module re-exports the one-concern-per-file implementations under
``gerrors.base.core_parts`` to keep a stable import path.
"""

from .core_parts import (
    DEFAULT_MAPPING,
    DEFAULT_UNKNOWN_CODE,
    NO_ORIGINAL_ERROR,
    Code,
    CodeLike,
    CoreError,
    CoreGrpcError,
    CoreRecord,
    FormatterConfigError,
    FuncLookuper,
    grpc_code_of,
    Lookuper,
    Mapper,
    NoOriginalError,
    TemplateConfigError,
    code_text,
    default_mapper,
    get_default_mapping,
    is_no_original_error,
)

__all__ = [
    "Code",
    "CodeLike",
    "code_text",
    "CoreError",
    "CoreGrpcError",
    "grpc_code_of",
    "CoreRecord",
    "Lookuper",
    "Mapper",
    "FuncLookuper",
    "DEFAULT_MAPPING",
    "DEFAULT_UNKNOWN_CODE",
    "default_mapper",
    "get_default_mapping",
    "FormatterConfigError",
    "TemplateConfigError",
    "NO_ORIGINAL_ERROR",
    "NoOriginalError",
    "is_no_original_error",
]
