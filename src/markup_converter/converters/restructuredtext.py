"""
reStructuredText converters backed by docutils.
"""

import io
import re
from typing import Any

from markup_converter.converters.base import BaseConverter, ConversionResult
from markup_converter.exceptions import ConversionError
from markup_converter.formats import Format

# docutils system messages start at column 0; indented lines continue them
_MESSAGE_LINE = re.compile(r"^\S.*$", re.MULTILINE)


class _DocutilsConverter(BaseConverter):
    """Shared implementation for converters publishing through docutils."""

    input_format = Format.RST
    requires_packages = ["docutils"]

    writer_name: str = ""
    fragment_part: str = "body"

    def convert(self, source: str, **options: Any) -> ConversionResult:
        """
        Convert reStructuredText.

        Args:
            source: reStructuredText document.
            **options: docutils settings overrides. ``fragment=True`` returns
                only the document body instead of the complete document.

        Returns:
            ConversionResult with the rendered document.
        """
        from docutils.core import publish_parts
        from docutils.utils import ApplicationError
        from docutils.writers import get_writer_class

        settings = self.resolve_options(**options)
        fragment = bool(settings.pop("fragment", False))

        warning_stream = io.StringIO()
        settings["warning_stream"] = warning_stream
        settings["_disable_config"] = True

        try:
            parts = publish_parts(
                source=source,
                writer=get_writer_class(self.writer_name)(),
                settings_overrides=settings,
            )
        except (ApplicationError, TypeError) as e:
            raise ConversionError(f"Failed to convert reStructuredText: {e}") from e

        content = parts[self.fragment_part] if fragment else parts["whole"]
        warnings = _MESSAGE_LINE.findall(warning_stream.getvalue())

        return ConversionResult(
            content=content,
            input_format=str(self.input_format),
            output_format=str(self.output_format),
            warnings=warnings,
            metadata={
                "title": parts.get("title", ""),
                "writer": self.writer_name,
                "fragment": fragment,
            },
        )


class RestructuredTextToHtml(_DocutilsConverter):
    """Converts reStructuredText to HTML5."""

    format_name = "reStructuredText to HTML"
    output_format = Format.HTML
    writer_name = "html5"
    fragment_part = "html_body"


class RestructuredTextToLatex(_DocutilsConverter):
    """Converts reStructuredText to LaTeX."""

    format_name = "reStructuredText to LaTeX"
    output_format = Format.LATEX
    writer_name = "latex"
