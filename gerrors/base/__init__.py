"""
gerrors Base Package

Exports the classification vocabulary, the formatter and its options, the
error value, logger capabilities and gRPC status projection.

Layering (leaves first):
- core: codes, record protocols, lookupers and the default table
- labels / template: metadata ingestion and message rendering
- formatter / general_error: configuration and error creation
- loggers / grpc_status: logging dispatch and wire projection
"""

from .core import (
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
    Lookuper,
    Mapper,
    TemplateConfigError,
    default_mapper,
    get_default_mapping,
)
from .formatter import (
    Formatter,
    FormatterOption,
    with_disabled_missing_value_replacement,
    with_domain,
    with_labels,
    with_logger,
    with_lookup_func,
    with_lookuper,
    with_missing_value_replacement,
    with_template,
)
from .general_error import ErrorDetails, GeneralError
from .grpc_status import find_general_error, grpc_status, to_rpc_status
from .labels import LabelPair, MissingValuePolicy, PairStatus
from .loggers import (
    DebugLogger,
    ErrorLogger,
    InfoLogger,
    LoggingAdapter,
    LogLevel,
    TraceLogger,
    WarnLogger,
)
from .template import ErrorTemplate, TemplateData

__all__ = [
    # core
    "Code",
    "CodeLike",
    "CoreError",
    "CoreGrpcError",
    "CoreRecord",
    "Lookuper",
    "Mapper",
    "FuncLookuper",
    "DEFAULT_MAPPING",
    "DEFAULT_UNKNOWN_CODE",
    "NO_ORIGINAL_ERROR",
    "default_mapper",
    "get_default_mapping",
    "FormatterConfigError",
    "TemplateConfigError",
    # formatter
    "Formatter",
    "FormatterOption",
    "with_template",
    "with_lookuper",
    "with_lookup_func",
    "with_labels",
    "with_missing_value_replacement",
    "with_disabled_missing_value_replacement",
    "with_logger",
    "with_domain",
    # errors
    "GeneralError",
    "ErrorDetails",
    "grpc_status",
    "to_rpc_status",
    "find_general_error",
    # labels / template
    "LabelPair",
    "MissingValuePolicy",
    "PairStatus",
    "ErrorTemplate",
    "TemplateData",
    # logging
    "LogLevel",
    "ErrorLogger",
    "WarnLogger",
    "InfoLogger",
    "DebugLogger",
    "TraceLogger",
    "LoggingAdapter",
]
