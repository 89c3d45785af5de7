"""
Converter factory: resolves a format pair to a ready-to-use converter.

Example:
    factory = ConverterFactory()
    converter = factory.get(Format.RST, Format.HTML)
    result = converter.convert(text)
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from markup_converter.converters.base import BaseConverter
from markup_converter.converters.restructuredtext import (
    RestructuredTextToHtml,
    RestructuredTextToLatex,
)
from markup_converter.definitions import Definition, DefinitionFactory, DefinitionProvider
from markup_converter.exceptions import ConverterNotFoundError
from markup_converter.formats import Format, FormatCollection

logger = logging.getLogger(__name__)

ConverterConstructor = Callable[[Definition], BaseConverter]


@dataclass(frozen=True)
class ConverterBinding:
    """Associates an (input, output) format pair with a converter constructor."""

    input_format: str
    output_format: str
    converter: ConverterConstructor

    @property
    def pair(self) -> tuple[str, str]:
        """The ordered (input, output) pair handled by this binding."""
        return self.input_format, self.output_format


DEFAULT_CONVERTERS: tuple[ConverterBinding, ...] = (
    ConverterBinding(Format.RST, Format.HTML, RestructuredTextToHtml),
    ConverterBinding(Format.RST, Format.LATEX, RestructuredTextToLatex),
)


def default_definition_factory() -> DefinitionFactory:
    """Create a DefinitionFactory for all known formats."""
    return DefinitionFactory(FormatCollection())


class ConverterFactory:
    """
    Creates converters for (input format, output format) pairs.

    The factory owns an ordered registry of ConverterBindings and a
    definition provider. When several bindings handle the same pair the
    first registered one is used.
    """

    def __init__(
        self,
        converters: Iterable[ConverterBinding] | None = None,
        definition_factory: DefinitionProvider | None = None,
    ) -> None:
        """
        Initialize the factory.

        Args:
            converters: Bindings to register. Defaults to ``DEFAULT_CONVERTERS``;
                an explicitly empty iterable gives an empty registry.
            definition_factory: Provider of Definitions. Defaults to a
                DefinitionFactory covering every known format.
        """
        self._converters: tuple[ConverterBinding, ...] = tuple(
            DEFAULT_CONVERTERS if converters is None else converters
        )
        self._definition_factory = (
            default_definition_factory() if definition_factory is None else definition_factory
        )

    @property
    def converters(self) -> tuple[ConverterBinding, ...]:
        """The registered bindings in registration order."""
        return self._converters

    @property
    def definition_factory(self) -> DefinitionProvider:
        """The provider Definitions are requested from."""
        return self._definition_factory

    def get(self, input_format: str, output_format: str) -> BaseConverter:
        """
        Create a new converter for the given formats.

        The definition is requested before the registry is searched, so a
        provider that rejects the pair fails first and its error propagates
        unchanged.

        Args:
            input_format: Format of the source document.
            output_format: Format to convert to.

        Returns:
            A converter constructed with the Definition for the pair.

        Raises:
            ConverterNotFoundError: If no binding handles the pair.
        """
        definition = self._definition_factory.get(input_format, output_format)

        for binding in self._converters:
            if binding.pair == (input_format, output_format):
                logger.debug(
                    "Resolved %s -> %s to %r", input_format, output_format, binding.converter
                )
                return binding.converter(definition)

        logger.debug("No converter registered for %s -> %s", input_format, output_format)
        raise ConverterNotFoundError(input_format, output_format)

    def get_supported_input_formats(self, output_format: str) -> list[str]:
        """
        Get the input formats that can be converted to the given format.

        Args:
            output_format: The desired output format.

        Returns:
            Input formats in registration order; empty when there are none.
        """
        return [
            binding.input_format
            for binding in self._converters
            if binding.output_format == output_format
        ]

    def set_converters(self, converters: Iterable[ConverterBinding]) -> None:
        """Replace all registered bindings."""
        self._converters = tuple(converters)
        logger.debug("Converter registry replaced with %d binding(s)", len(self._converters))
