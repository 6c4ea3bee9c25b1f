"""Core parts package public surface.

Re-exports the classification vocabulary and lookup components.
Prefer importing from `gerrors.base.core` for the stable surface.
"""

from .code import Code, CodeLike, code_text
from .core_error import CoreError, CoreGrpcError, grpc_code_of
from .core_record import CoreRecord
from .lookuper import Lookuper
from .mapper import FuncLookuper, LookupFunc, Mapper
from .default_mapping import (
    DEFAULT_MAPPING,
    DEFAULT_UNKNOWN_CODE,
    default_mapper,
    get_default_mapping,
)
from .config_error import FormatterConfigError, TemplateConfigError
from .sentinel import NO_ORIGINAL_ERROR, NoOriginalError, is_no_original_error

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
    "LookupFunc",
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
