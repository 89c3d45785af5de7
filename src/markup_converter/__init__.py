"""
Markup Converter - convert documents between markup formats.

Resolves an (input format, output format) pair to a converter through a
ConverterFactory and runs it on files, URLs or text.

Built-in conversions:
- reStructuredText -> HTML
- reStructuredText -> LaTeX
"""

from markup_converter.conversion import ConversionConfig, DocumentConverter
from markup_converter.converters import (
    DEFAULT_CONVERTERS,
    BaseConverter,
    ConversionResult,
    ConverterBinding,
    ConverterFactory,
    default_definition_factory,
)
from markup_converter.definitions import Definition, DefinitionFactory
from markup_converter.exceptions import (
    ConversionError,
    ConverterNotFoundError,
    FormatNotFoundError,
    MarkupConverterError,
)
from markup_converter.formats import Format, FormatCollection, FormatInfo

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConverterFactory",
    "ConverterBinding",
    "DEFAULT_CONVERTERS",
    "default_definition_factory",
    # Converters
    "BaseConverter",
    "ConversionResult",
    # Definitions and formats
    "Definition",
    "DefinitionFactory",
    "Format",
    "FormatCollection",
    "FormatInfo",
    # Service
    "ConversionConfig",
    "DocumentConverter",
    # Errors
    "MarkupConverterError",
    "ConversionError",
    "ConverterNotFoundError",
    "FormatNotFoundError",
    # Version
    "__version__",
]
