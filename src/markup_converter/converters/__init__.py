"""
Converters package for transforming markup documents between formats.

Built-in converters:
- reStructuredText -> HTML (html5 writer) - requires docutils
- reStructuredText -> LaTeX - requires docutils
"""

from markup_converter.converters.base import BaseConverter, ConversionResult
from markup_converter.converters.factory import (
    DEFAULT_CONVERTERS,
    ConverterBinding,
    ConverterFactory,
    default_definition_factory,
)
from markup_converter.converters.restructuredtext import (
    RestructuredTextToHtml,
    RestructuredTextToLatex,
)

__all__ = [
    "BaseConverter",
    "ConversionResult",
    "ConverterBinding",
    "ConverterFactory",
    "DEFAULT_CONVERTERS",
    "RestructuredTextToHtml",
    "RestructuredTextToLatex",
    "default_definition_factory",
]
