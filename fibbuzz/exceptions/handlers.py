import logging

import click
from pydantic import ValidationError

from .errors import FibBuzzError

logger = logging.getLogger(__name__)


def handle_validation_error(error: ValidationError):
    logger.info(f"Input invalid: {error}")


def handle_cli_error(error: FibBuzzError):
    logger.info(f"{type(error).__name__}: {error}")
    for line in error.lines:
        click.echo(line)


def handle_generic_exception(error: Exception, context: str = "Error"):
    logger.exception(f"{context}: {error}")
    click.echo(f"{context}: {error}")
