"""
Base converter interface for markup conversion.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from markup_converter.definitions import Definition


@dataclass
class ConversionResult:
    """Result of a markup conversion operation."""

    content: str
    """The converted document."""

    input_format: str
    """Format the document was converted from."""

    output_format: str
    """Format the document was converted to."""

    warnings: list[str] = field(default_factory=list)
    """Non-fatal warnings encountered during conversion."""

    metadata: dict[str, Any] = field(default_factory=dict)
    """Additional metadata extracted from the source document."""

    def __post_init__(self) -> None:
        """Validate the result after initialization."""
        if not isinstance(self.content, str):
            raise ValueError("content must be a string")


class BaseConverter(ABC):
    """
    Abstract base class for markup converters.

    A converter is always constructed with exactly one Definition, which
    describes the format pair it was resolved for and the default options
    for that pair.
    """

    # Class-level format metadata
    format_name: str = "Unknown"
    input_format: str = ""
    output_format: str = ""
    requires_packages: list[str] = []

    def __init__(self, definition: Definition) -> None:
        """Initialize the converter with its definition."""
        self._check_dependencies()
        self._definition = definition

    @property
    def definition(self) -> Definition:
        """The definition this converter was constructed with."""
        return self._definition

    def _check_dependencies(self) -> None:
        """Check if required packages are installed."""
        missing = []
        for package in self.requires_packages:
            try:
                __import__(package.replace("-", "_"))
            except ImportError:
                missing.append(package)

        if missing:
            raise ImportError(
                f"Missing required packages for {self.format_name}: {', '.join(missing)}. "
                f"Install with: pip install {' '.join(missing)}"
            )

    def resolve_options(self, **options: Any) -> dict[str, Any]:
        """Return the definition's options overlaid with the given ones."""
        resolved = dict(self._definition.options)
        resolved.update(options)
        return resolved

    @abstractmethod
    def convert(self, source: str, **options: Any) -> ConversionResult:
        """
        Convert a document.

        Args:
            source: Document text in the input format.
            **options: Overrides for the definition's default options.

        Returns:
            ConversionResult containing the converted document.
        """
        pass

    def convert_from_bytes(
        self,
        data: bytes,
        encoding: str = "utf-8",
        **options: Any,
    ) -> ConversionResult:
        """Decode raw bytes and convert them."""
        return self.convert(data.decode(encoding), **options)

    @classmethod
    def is_available(cls) -> bool:
        """Check if the converter's dependencies are installed."""
        for package in cls.requires_packages:
            try:
                __import__(package.replace("-", "_"))
            except ImportError:
                return False
        return True

    @classmethod
    def get_info(cls) -> dict[str, Any]:
        """
        Get converter information.

        Returns:
            Dictionary with converter metadata.
        """
        return {
            "format_name": cls.format_name,
            "input_format": str(cls.input_format),
            "output_format": str(cls.output_format),
            "requires_packages": cls.requires_packages,
            "available": cls.is_available(),
        }
