"""
Document conversion service: reads documents and runs the resolved converter.
"""

import logging
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import requests

from markup_converter.converters.base import ConversionResult
from markup_converter.converters.factory import ConverterFactory
from markup_converter.formats import FormatCollection

logger = logging.getLogger(__name__)


@dataclass
class ConversionConfig:
    """Configuration for a document conversion."""

    output_format: str
    input_format: str | None = None
    options: dict[str, Any] = field(default_factory=dict)
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        """Normalize format names after initialization."""
        self.output_format = str(self.output_format).lower()
        if self.input_format:
            self.input_format = str(self.input_format).lower()


class DocumentConverter:
    """
    Convert documents from files, URLs or text.

    The input format is taken from the configuration, or detected from the
    file extension when the configuration does not name one. The converter
    itself is resolved through a ConverterFactory on every call.
    """

    def __init__(
        self,
        factory: ConverterFactory | None = None,
        formats: FormatCollection | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            factory: Factory used to resolve converters. Defaults to a
                ConverterFactory with the built-in converters.
            formats: Formats used for extension detection. Defaults to the
                collection of the factory's definition provider, or the
                built-in formats when the provider exposes none.
        """
        self.factory = ConverterFactory() if factory is None else factory
        if formats is None:
            formats = getattr(self.factory.definition_factory, "formats", None)
        self.formats = FormatCollection() if formats is None else formats

    def convert_text(self, text: str, config: ConversionConfig) -> ConversionResult:
        """
        Convert a document held in memory.

        Raises:
            ValueError: If the configuration names no input format.
        """
        if not config.input_format:
            raise ValueError("input_format is required when converting text")

        converter = self.factory.get(config.input_format, config.output_format)
        return converter.convert(text, **config.options)

    def convert_file(
        self,
        file_path: str | Path,
        config: ConversionConfig,
        output_path: str | Path | None = None,
    ) -> ConversionResult:
        """
        Convert a document on disk.

        Args:
            file_path: Path to the source document.
            config: Conversion configuration.
            output_path: Where to write the converted document, if anywhere.

        Returns:
            ConversionResult with the converted document.
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")

        input_format = config.input_format or self.formats.detect(file_path)
        converter = self.factory.get(input_format, config.output_format)

        logger.info("Converting %s (%s -> %s)", file_path, input_format, config.output_format)
        result = converter.convert_from_bytes(
            file_path.read_bytes(), encoding=config.encoding, **config.options
        )
        result.metadata.setdefault("source", str(file_path))

        if output_path is not None:
            self._write_output(result, Path(output_path), config.encoding)

        return result

    def convert_from_url(
        self,
        url: str,
        config: ConversionConfig,
        output_path: str | Path | None = None,
        work_dir: str | None = None,
    ) -> ConversionResult:
        """
        Download a document and convert it.

        Args:
            url: URL of the source document.
            config: Conversion configuration.
            output_path: Where to write the converted document, if anywhere.
            work_dir: Working directory for the downloaded file.

        Returns:
            ConversionResult with the converted document.
        """
        input_format = config.input_format or self.formats.detect(url)
        extensions = self.formats[input_format].extensions
        ext = extensions[0] if extensions else ""

        work_path = Path(work_dir) if work_dir else Path(tempfile.mkdtemp())
        work_path.mkdir(parents=True, exist_ok=True)
        download_path = work_path / f"source{ext}"

        try:
            self._download_file(url, download_path)
            result = self.convert_file(
                download_path,
                ConversionConfig(
                    output_format=config.output_format,
                    input_format=input_format,
                    options=config.options,
                    encoding=config.encoding,
                ),
                output_path=output_path,
            )
            result.metadata["source"] = url
            return result
        finally:
            # Clean up if using temp directory
            if not work_dir:
                shutil.rmtree(work_path, ignore_errors=True)

    def supported_input_formats(self, output_format: str) -> list[str]:
        """Get input formats convertible to the given format."""
        return self.factory.get_supported_input_formats(output_format)

    def _download_file(self, url: str, dest_path: Path) -> None:
        """Download a file from URL."""
        logger.info("Downloading %s", url)
        response = requests.get(url, stream=True, timeout=60)
        response.raise_for_status()

        with open(dest_path, "wb") as f:
            for chunk in response.iter_content(chunk_size=8192):
                f.write(chunk)

    def _write_output(self, result: ConversionResult, output_path: Path, encoding: str) -> None:
        """Write converted content to disk."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.content, encoding=encoding)
        logger.info("Wrote %s", output_path)
