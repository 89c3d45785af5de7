"""
Known document formats and the collection used to look them up.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePosixPath

from markup_converter.exceptions import FormatNotFoundError


class Format(str, Enum):
    """Identifiers of the markup and output formats this package knows about."""

    RST = "rst"
    MARKDOWN = "markdown"
    JSON = "json"
    HTML = "html"
    LATEX = "latex"
    PDF = "pdf"
    DOCBOOK = "docbook"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class FormatInfo:
    """Description of a single format."""

    name: str
    """Format identifier, one of the ``Format`` values for built-in formats."""

    mime_type: str
    """MIME type of documents in this format."""

    extensions: tuple[str, ...] = field(default_factory=tuple)
    """File extensions, lower case and including the leading dot."""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Format name must not be empty")
        object.__setattr__(self, "name", str(self.name).lower())
        object.__setattr__(
            self, "extensions", tuple(ext.lower() for ext in self.extensions)
        )

    def get_info(self) -> dict[str, object]:
        """Return the format description as a plain dictionary."""
        return {
            "name": self.name,
            "mime_type": self.mime_type,
            "extensions": list(self.extensions),
        }


DEFAULT_FORMATS: tuple[FormatInfo, ...] = (
    FormatInfo(Format.RST, "text/x-rst", (".rst", ".txt", ".rest", ".restx")),
    FormatInfo(Format.MARKDOWN, "text/x-markdown", (".md", ".markdown")),
    FormatInfo(Format.JSON, "application/json", (".json",)),
    FormatInfo(Format.HTML, "text/html", (".html", ".htm")),
    FormatInfo(Format.LATEX, "application/x-latex", (".tex", ".latex", ".ltx")),
    FormatInfo(Format.PDF, "application/pdf", (".pdf",)),
    FormatInfo(Format.DOCBOOK, "application/docbook+xml", (".xml", ".dbk")),
)


class FormatCollection:
    """
    Ordered collection of known formats.

    Formats are looked up by name with ``collection[name]``; file paths and
    URLs are mapped to a format with ``detect``.
    """

    def __init__(self, formats: Iterable[FormatInfo] | None = None) -> None:
        """
        Initialize the collection.

        Args:
            formats: Formats to register. Defaults to ``DEFAULT_FORMATS``.
        """
        self._formats: dict[str, FormatInfo] = {}
        for info in DEFAULT_FORMATS if formats is None else formats:
            self.register(info)

    def register(self, info: FormatInfo) -> FormatInfo:
        """Add a format, replacing any existing format with the same name."""
        self._formats[info.name] = info
        return info

    def __getitem__(self, name: str) -> FormatInfo:
        key = str(name).lower()
        if key not in self._formats:
            raise FormatNotFoundError(
                key,
                f"Unknown format: {name}. Supported: {', '.join(self._formats)}",
            )
        return self._formats[key]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._formats

    def __iter__(self) -> Iterator[FormatInfo]:
        return iter(self._formats.values())

    def __len__(self) -> int:
        return len(self._formats)

    def names(self) -> list[str]:
        """Return the registered format names in registration order."""
        return list(self._formats)

    def detect(self, file_path: str | Path) -> str:
        """
        Determine the format of a file from its extension.

        Args:
            file_path: Local path or URL path of the document.

        Returns:
            The name of the first registered format claiming the extension.

        Raises:
            FormatNotFoundError: If no format claims the extension.
        """
        suffix = PurePosixPath(str(file_path).split("?", 1)[0]).suffix.lower()
        for info in self._formats.values():
            if suffix and suffix in info.extensions:
                return info.name
        raise FormatNotFoundError(
            suffix,
            f"Unknown file extension: {suffix or '(none)'}. "
            f"Supported: {', '.join(self._extensions())}",
        )

    def _extensions(self) -> list[str]:
        return [ext for info in self._formats.values() for ext in info.extensions]
