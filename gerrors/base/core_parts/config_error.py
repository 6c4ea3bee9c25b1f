"""
Configuration-time exceptions.

These are the only exceptions gerrors raises to its callers. They surface while
a :class:`~gerrors.base.formatter.Formatter` is being built, never while errors
are created, rendered, logged or projected.
"""
from __future__ import annotations


class FormatterConfigError(ValueError):
    """An option passed to ``Formatter`` carries an unusable value."""


class TemplateConfigError(FormatterConfigError):
    """The message template failed to compile.

    Attributes:
        template: The offending template text.
    """

    def __init__(self, template: str, reason: str) -> None:
        super().__init__(f"invalid error template {template!r}: {reason}")
        self.template = template
        self.reason = reason


__all__ = ["FormatterConfigError", "TemplateConfigError"]
