"""
Conversion definitions: the option set that is valid for a format pair.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from markup_converter.formats import Format, FormatCollection, FormatInfo

# Default options per (input, output) pair. For the docutils based converters
# these are docutils settings overrides plus the converter's own switches.
DEFAULT_OPTIONS: dict[tuple[str, str], dict[str, Any]] = {
    (Format.RST, Format.HTML): {
        "doctitle_xform": True,
        "initial_header_level": 1,
        "report_level": 2,
        "halt_level": 5,
        "fragment": False,
    },
    (Format.RST, Format.LATEX): {
        "doctitle_xform": True,
        "report_level": 2,
        "halt_level": 5,
    },
}


@dataclass(frozen=True)
class Definition:
    """Describes a conversion from one format to another."""

    input_format: FormatInfo
    output_format: FormatInfo
    options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def pair(self) -> tuple[str, str]:
        """The (input, output) format names this definition describes."""
        return self.input_format.name, self.output_format.name


class DefinitionProvider(Protocol):
    """Anything able to produce a Definition for a format pair."""

    def get(self, input_format: str, output_format: str) -> Definition: ...


class DefinitionFactory:
    """Creates Definitions for format pairs known to a FormatCollection."""

    def __init__(
        self,
        formats: FormatCollection,
        options: Mapping[tuple[str, str], Mapping[str, Any]] | None = None,
    ) -> None:
        """
        Initialize the factory.

        Args:
            formats: The formats definitions may be created for.
            options: Default options per (input, output) pair. Defaults to
                ``DEFAULT_OPTIONS``.
        """
        self.formats = formats
        self._options = {
            (str(src).lower(), str(dst).lower()): dict(values)
            for (src, dst), values in (DEFAULT_OPTIONS if options is None else options).items()
        }

    def get(self, input_format: str, output_format: str) -> Definition:
        """
        Create a new Definition for the given formats.

        Raises:
            FormatNotFoundError: If either format is unknown to the collection.
        """
        source = self.formats[input_format]
        target = self.formats[output_format]
        return Definition(
            input_format=source,
            output_format=target,
            options=dict(self._options.get((source.name, target.name), {})),
        )
