"""
Exceptions raised while compiling a schema document.

Every failure is fatal to the run; callers catch ``GeneratorError``.
"""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class UnreadableInputError(GeneratorError):
    """Schema input is missing or is not valid structured data."""

    pass


class UnsupportedReferenceError(GeneratorError):
    """A $ref does not point into the document's definitions."""

    pass


class BadVersionError(GeneratorError):
    """A version key has no integer major version."""

    pass


class AmbiguousTypeError(GeneratorError):
    """A schema type list does not name exactly one concrete type."""

    pass


class UnresolvableTypeError(GeneratorError):
    """A schema type cannot be mapped to a target type."""

    pass


class UnknownCompositeError(GeneratorError):
    """An object schema is used before its declaration was registered."""

    pass


class FormattingError(GeneratorError):
    """Generated source is not well-formed enough to be formatted."""

    pass
