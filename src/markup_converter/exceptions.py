"""
Exceptions raised while resolving formats, definitions and converters.
"""


class MarkupConverterError(Exception):
    """Base class for all markup-converter errors."""


class FormatNotFoundError(MarkupConverterError, LookupError):
    """Raised when a format name or file extension is not known."""

    def __init__(self, format_name: str, message: str | None = None) -> None:
        self.format_name = format_name
        super().__init__(message or f"Unknown format: {format_name}")


class ConverterNotFoundError(MarkupConverterError, LookupError):
    """Raised when no registered converter handles a format pair."""

    def __init__(self, input_format: str, output_format: str) -> None:
        self.input_format = input_format
        self.output_format = output_format
        super().__init__(
            f"No converter could be found to convert from {input_format} to {output_format}"
        )


class ConversionError(MarkupConverterError):
    """Raised when a converter fails to render a document."""
