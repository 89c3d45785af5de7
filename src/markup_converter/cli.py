"""
Command-line interface for Markup Converter.
"""

import json
import logging
from typing import Any

import click
import requests

from markup_converter import __version__
from markup_converter.conversion import ConversionConfig, DocumentConverter
from markup_converter.exceptions import MarkupConverterError

_HANDLED_ERRORS = (
    MarkupConverterError,
    OSError,
    ValueError,
    ImportError,
    requests.RequestException,
)


# Custom help class for better formatting
class CustomGroup(click.Group):
    """Custom group with better help formatting."""

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Write the help into the formatter with additional info."""
        self.format_usage(ctx, formatter)
        self.format_help_text(ctx, formatter)
        self.format_options(ctx, formatter)
        self.format_commands(ctx, formatter)

        # Add examples section
        formatter.write_paragraph()
        with formatter.section("Examples"):
            formatter.write_text("mconv convert README.rst -t html -o README.html")
            formatter.write_text("mconv convert -u https://example.com/guide.rst -t latex")
            formatter.write_text("mconv inputs html")
            formatter.write_text("mconv formats")


@click.group(cls=CustomGroup)
@click.version_option(version=__version__, prog_name="markup-converter")
@click.option(
    "--log-level",
    envvar="MARKUP_CONVERTER_LOG_LEVEL",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity",
)
def main(log_level: str) -> None:
    """
    Markup Converter - convert documents between markup formats.

    Resolves a converter for an (input format, output format) pair and runs it
    on a local file or a downloaded document.

    \b
    Environment variables:
      MARKUP_CONVERTER_LOG_LEVEL  Default for --log-level
    """
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@main.command()
def formats() -> None:
    """
    List all known formats and the registered converters.

    Shows extensions and MIME types of each format, and which converters are
    available and whether their required dependencies are installed.

    \b
    Examples:
      mconv formats
    """
    service = DocumentConverter()

    click.echo("\n📁 Known Formats\n")
    click.echo("-" * 60)

    for info in service.formats:
        fmt = info.get_info()
        click.echo(f"\n• {fmt['name']}")
        click.echo(f"   Extensions: {', '.join(fmt['extensions'])}")
        click.echo(f"   MIME type: {fmt['mime_type']}")

    click.echo("\n" + "-" * 60)
    click.echo("\n🔄 Converters\n")
    click.echo("-" * 60)

    for binding in service.factory.converters:
        get_info = getattr(binding.converter, "get_info", None)
        if get_info is None:
            click.echo(f"\n✅ {binding.input_format} -> {binding.output_format}")
            click.echo("   Requires: (built-in)")
            continue

        conv = get_info()
        status = "✅" if conv["available"] else "❌"

        click.echo(f"\n{status} {conv['format_name']}")
        click.echo(f"   Converts: {binding.input_format} -> {binding.output_format}")

        if conv["requires_packages"]:
            packages = ", ".join(conv["requires_packages"])
            click.echo(f"   Requires: {packages}")
            if not conv["available"]:
                click.echo(f"   Install: pip install {' '.join(conv['requires_packages'])}")
        else:
            click.echo("   Requires: (built-in)")

    click.echo("\n" + "-" * 60 + "\n")


@main.command()
@click.argument("output_format")
def inputs(output_format: str) -> None:
    """
    List the input formats that can be converted to OUTPUT_FORMAT.

    \b
    Examples:
      mconv inputs html
    """
    supported = DocumentConverter().supported_input_formats(output_format.lower())

    if not supported:
        click.echo(f"\n📂 No converters produce {output_format}.\n")
        return

    click.echo(f"\n📂 Formats convertible to {output_format}:\n")
    for input_format in supported:
        click.echo(f"   • {input_format}")
    click.echo()


@main.command()
@click.argument("input_file", required=False, type=click.Path(exists=True, dir_okay=False))
@click.option("--url", "-u", help="URL to download the document from")
@click.option("--to", "-t", "output_format", required=True, help="Output format")
@click.option("--from", "-f", "input_format", help="Input format (detected if omitted)")
@click.option("--output", "-o", "output_file", type=click.Path(), help="Output file path")
@click.option(
    "--set",
    "-s",
    "option_pairs",
    multiple=True,
    metavar="KEY=VALUE",
    help="Conversion option; values are parsed as JSON when possible",
)
@click.option("--fragment", is_flag=True, help="Emit only the document body")
@click.option("--encoding", default="utf-8", show_default=True, help="Text encoding")
def convert(
    input_file: str | None,
    url: str | None,
    output_format: str,
    input_format: str | None,
    output_file: str | None,
    option_pairs: tuple[str, ...],
    fragment: bool,
    encoding: str,
) -> None:
    """
    Convert a document to another markup format.

    Provide either INPUT_FILE or --url. The converted document is written to
    --output, or to standard output when no output file is given.

    \b
    Examples:
      mconv convert README.rst -t html -o README.html
      mconv convert notes.txt --from rst -t html --fragment
      mconv convert guide.rst -t html -s initial_header_level=2
      mconv convert -u https://example.com/guide.rst -t latex -o guide.tex
    """
    if not input_file and not url:
        raise click.UsageError("Either INPUT_FILE or --url must be provided")

    if input_file and url:
        raise click.UsageError("Cannot specify both INPUT_FILE and --url")

    options = _parse_options(option_pairs)
    if fragment:
        options["fragment"] = True

    config = ConversionConfig(
        output_format=output_format,
        input_format=input_format,
        options=options,
        encoding=encoding,
    )
    service = DocumentConverter()

    try:
        if url:
            result = service.convert_from_url(url, config, output_path=output_file)
        else:
            result = service.convert_file(input_file, config, output_path=output_file)  # type: ignore[arg-type]
    except _HANDLED_ERRORS as e:
        raise click.ClickException(str(e))

    if result.warnings:
        click.echo(f"⚠️  Warnings ({len(result.warnings)}):", err=True)
        for warning in result.warnings[:10]:
            click.echo(f"   - {warning}", err=True)
        if len(result.warnings) > 10:
            click.echo(f"   ... and {len(result.warnings) - 10} more", err=True)

    if output_file:
        click.echo(
            f"✅ Converted {result.input_format} to {result.output_format}: {output_file}"
        )
    else:
        click.echo(result.content)


def _parse_options(pairs: tuple[str, ...]) -> dict[str, Any]:
    """Parse KEY=VALUE pairs into an options dictionary."""
    options: dict[str, Any] = {}
    for pair in pairs:
        key, sep, raw = pair.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"Expected KEY=VALUE, got: {pair}", param_hint="--set")
        try:
            value: Any = json.loads(raw)
        except json.JSONDecodeError:
            value = raw
        options[key.strip()] = value
    return options


if __name__ == "__main__":
    main()
