"""Command-line interface for the JSON Normalizer."""

import logging
import sys
import click
from . import __version__
from .json_normalizer import JSONNormalizer
from .types import ProcessingError


@click.command()
@click.version_option(version=__version__)
def main():
    """Normalize the JSON object on stdin and write the records to stdout."""
    logging.basicConfig(
        level=logging.WARNING,
        stream=sys.stderr,
        format='%(name)s - %(levelname)s - %(message)s'
    )

    normalizer = JSONNormalizer()
    raw = click.get_binary_stream('stdin').read()

    try:
        output = normalizer.normalize_bytes(raw)
    except ProcessingError as e:
        response = normalizer.error_handler.handle_processing_error(e)
        click.echo(f"Error: {response.message}", err=True)
        sys.exit(response.exit_code)

    for warning in output.warnings:
        click.echo(str(warning), err=True)

    stdout = click.get_binary_stream('stdout')
    stdout.write(output.json_string.encode('utf-8'))
    stdout.flush()


if __name__ == '__main__':
    main()
