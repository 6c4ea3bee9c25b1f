"""gerrors package

Rich, cohesive error handling: classified errors with template-rendered
messages, key/value metadata and projection to gRPC rich statuses
(``google.rpc.Status`` + ``google.rpc.ErrorInfo``, per Google AIP-193).

Purpose:
    Give every layer of a service one way to create errors that are readable
    in logs, carry machine-readable metadata, and cross an RPC boundary
    without losing their classification.

Quick start::

    import gerrors

    formatter = gerrors.Formatter(gerrors.with_labels("service", "billing"))
    err = formatter.new(exc, gerrors.Code.STORAGE, "table", "invoices")
    str(err)       # "error: storage(5) - <exc text>"
    err.grpc()     # google.rpc.Status with an ErrorInfo detail

Public API (re-exported):
    - Version: ``__version__``
    - Codes & records: :class:`Code`, :class:`CoreRecord`, :class:`Mapper`,
      ``get_default_mapping``
    - Formatter & options: :class:`Formatter`, ``with_*`` helpers
    - Errors: :class:`GeneralError`, ``grpc_status``, ``to_rpc_status``
    - Logging: :class:`LogLevel`, capability Protocols, :class:`LoggingAdapter`
    - Config: ``get_formatter_settings``, ``formatter_from_settings``

Notes:
    There is no process-wide default formatter. Build one at startup (or via
    ``formatter_from_settings``) and pass it explicitly.
"""

from .base import (
    DEFAULT_MAPPING,
    DEFAULT_UNKNOWN_CODE,
    NO_ORIGINAL_ERROR,
    Code,
    CodeLike,
    CoreError,
    CoreGrpcError,
    CoreRecord,
    DebugLogger,
    ErrorDetails,
    ErrorLogger,
    Formatter,
    FormatterConfigError,
    FormatterOption,
    FuncLookuper,
    GeneralError,
    InfoLogger,
    LoggingAdapter,
    LogLevel,
    Lookuper,
    Mapper,
    TemplateConfigError,
    TraceLogger,
    WarnLogger,
    default_mapper,
    get_default_mapping,
    grpc_status,
    to_rpc_status,
    with_disabled_missing_value_replacement,
    with_domain,
    with_labels,
    with_logger,
    with_lookup_func,
    with_lookuper,
    with_missing_value_replacement,
    with_template,
)
from .config import FormatterSettings, formatter_from_settings, get_formatter_settings
from .config.defaults import (
    METADATA_DEFAULT_MESSAGE,
    METADATA_ERROR_CODE,
    METADATA_IDENTIFIER,
    METADATA_ORIGINAL_ERROR,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # codes & records
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
    # formatter
    "Formatter",
    "FormatterOption",
    "FormatterConfigError",
    "TemplateConfigError",
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
    "METADATA_IDENTIFIER",
    "METADATA_ERROR_CODE",
    "METADATA_DEFAULT_MESSAGE",
    "METADATA_ORIGINAL_ERROR",
    # logging
    "LogLevel",
    "ErrorLogger",
    "WarnLogger",
    "InfoLogger",
    "DebugLogger",
    "TraceLogger",
    "LoggingAdapter",
    # config
    "FormatterSettings",
    "get_formatter_settings",
    "formatter_from_settings",
]
