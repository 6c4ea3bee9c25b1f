"""gerrors.config.defaults
=======================

Central place for small, stable default values used across the gerrors
package. These defaults can be overridden via environment variables, an
external config file or formatter options, but provide sensible fallbacks for
local development and tests.

Module Purpose
--------------
- Provide a single import location for conservative default constants (no I/O).
- Keep formatter and label code free of magic literals.

This module does not import from other gerrors packages, which would
create circular dependencies. Only plain constants should live here.
"""

from __future__ import annotations

# ---- Rendering ----

# Template used when no ``with_template`` option is given.
DEFAULT_TEMPLATE = "error: {identifier}({code}) - {message}"

# Rendered in place of the message when template execution fails.
RENDER_FAILURE_FORMAT = "failed to execute template: {fault} (original error: {message})"

# Rendered for a label key the error does not carry.
MISSING_LABEL_TEXT = "<no value>"


# ---- Labels ----

# Token paired with a trailing key that has no value.
DEFAULT_MISSING_VALUE = "(MISSING)"

# Upper bound on label key length; longer keys are dropped.
MAX_LABEL_KEY_LENGTH = 64

# Accepted label key characters: ASCII letters, digits, underscore, dot, hyphen.
LABEL_KEY_PATTERN = r"^[A-Za-z0-9_.-]+$"


# ---- Reserved metadata keys ----

METADATA_IDENTIFIER = "_identifier"
METADATA_ERROR_CODE = "_error_code"
METADATA_DEFAULT_MESSAGE = "_default_message"
METADATA_ORIGINAL_ERROR = "_original_error"

# Text stored under METADATA_ORIGINAL_ERROR when no original error exists.
NO_ORIGINAL_ERROR_TEXT = "no original error"


# ---- Logging ----

# Shared logger name for library diagnostics.
LOGGER_NAME = "gerrors"

# Numeric level registered for ``trace`` calls on stdlib loggers.
TRACE_LEVEL_NUM = 5


# ---- Environment variables ----

ENV_TEMPLATE = "GERRORS_TEMPLATE"
ENV_MISSING_VALUE = "GERRORS_MISSING_VALUE"
ENV_DISABLE_MISSING_VALUE = "GERRORS_DISABLE_MISSING_VALUE"
ENV_LABELS = "GERRORS_LABELS"
ENV_DOMAIN = "GERRORS_DOMAIN"
ENV_LOG_LEVEL = "GERRORS_LOG_LEVEL"
ENV_CONFIG_FILE = "GERRORS_CONFIG_FILE"
