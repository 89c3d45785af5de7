"""Tests for formats and definitions."""

import pytest

from markup_converter.definitions import DEFAULT_OPTIONS, Definition, DefinitionFactory
from markup_converter.exceptions import FormatNotFoundError, MarkupConverterError
from markup_converter.formats import Format, FormatCollection, FormatInfo


class TestFormat:
    """Test the Format enumeration."""

    def test_members_compare_to_strings(self) -> None:
        """Test Format members equal their plain string values."""
        assert Format.RST == "rst"
        assert Format("html") is Format.HTML
        assert str(Format.LATEX) == "latex"


class TestFormatCollection:
    """Test FormatCollection lookups."""

    def test_default_formats(self) -> None:
        """Test the default collection holds every Format."""
        collection = FormatCollection()
        assert len(collection) == len(Format)
        assert collection["rst"].mime_type == "text/x-rst"
        assert ".htm" in collection[Format.HTML].extensions

    def test_lookup_is_case_insensitive(self) -> None:
        """Test names are matched regardless of case."""
        collection = FormatCollection()
        assert collection["RST"].name == "rst"
        assert "Markdown" in collection

    def test_unknown_format(self) -> None:
        """Test error for an unknown name."""
        with pytest.raises(FormatNotFoundError, match="Unknown format: asciidoc") as exc_info:
            FormatCollection()["asciidoc"]

        assert exc_info.value.format_name == "asciidoc"
        assert isinstance(exc_info.value, MarkupConverterError)
        assert isinstance(exc_info.value, LookupError)

    def test_detect_by_extension(self) -> None:
        """Test format detection from paths and URLs."""
        collection = FormatCollection()
        assert collection.detect("docs/index.rst") == "rst"
        assert collection.detect("README.MD") == "markdown"
        assert collection.detect("https://example.com/guide.tex?raw=1") == "latex"

    def test_detect_unknown_extension(self) -> None:
        """Test error for an unclaimed extension."""
        with pytest.raises(FormatNotFoundError, match="Unknown file extension: .xyz"):
            FormatCollection().detect("data.xyz")

    def test_detect_without_extension(self) -> None:
        """Test error for a path without extension."""
        with pytest.raises(FormatNotFoundError, match="Unknown file extension"):
            FormatCollection().detect("Makefile")

    def test_register_custom_format(self) -> None:
        """Test adding a format to a collection."""
        collection = FormatCollection([])
        collection.register(FormatInfo("AsciiDoc", "text/asciidoc", (".ADOC",)))

        assert collection.names() == ["asciidoc"]
        assert collection.detect("manual.adoc") == "asciidoc"
        assert collection["asciidoc"].get_info() == {
            "name": "asciidoc",
            "mime_type": "text/asciidoc",
            "extensions": [".adoc"],
        }

    def test_empty_name_rejected(self) -> None:
        """Test a format needs a name."""
        with pytest.raises(ValueError, match="must not be empty"):
            FormatInfo("", "text/plain")


class TestDefinitionFactory:
    """Test Definition creation."""

    def test_get_definition(self) -> None:
        """Test a definition describes the requested pair."""
        factory = DefinitionFactory(FormatCollection())
        definition = factory.get("rst", "html")

        assert isinstance(definition, Definition)
        assert definition.pair == ("rst", "html")
        assert definition.input_format.mime_type == "text/x-rst"
        assert definition.options == DEFAULT_OPTIONS[(Format.RST, Format.HTML)]

    def test_pair_without_options(self) -> None:
        """Test pairs without configured options get an empty mapping."""
        definition = DefinitionFactory(FormatCollection()).get("markdown", "pdf")
        assert definition.options == {}

    def test_options_are_copied(self) -> None:
        """Test definitions do not share option dictionaries."""
        factory = DefinitionFactory(FormatCollection())
        first = factory.get("rst", "html")
        first.options["fragment"] = True  # type: ignore[index]

        assert factory.get("rst", "html").options["fragment"] is False

    def test_custom_options(self) -> None:
        """Test options supplied to the factory."""
        factory = DefinitionFactory(
            FormatCollection(), options={("RST", "html"): {"report_level": 4}}
        )
        assert factory.get("rst", "html").options == {"report_level": 4}
        assert factory.get("rst", "latex").options == {}

    def test_unknown_input_format(self) -> None:
        """Test error for an unknown input format."""
        with pytest.raises(FormatNotFoundError):
            DefinitionFactory(FormatCollection()).get("asciidoc", "html")

    def test_unknown_output_format(self) -> None:
        """Test error for an unknown output format."""
        with pytest.raises(FormatNotFoundError):
            DefinitionFactory(FormatCollection()).get("rst", "epub")
