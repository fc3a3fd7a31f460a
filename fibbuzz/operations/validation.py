import logging

from pydantic import ValidationError

from ..exceptions.errors import InputConversionError
from ..exceptions.handlers import handle_validation_error
from ..models import CountInput

logger = logging.getLogger(__name__)


def parse_count(raw: str) -> int:
    """Parse the CLI argument into a count greater than zero."""
    try:
        data = CountInput(count=raw)
    except ValidationError as e:
        handle_validation_error(e)
        raise InputConversionError(raw) from e

    logger.debug(f"Input {raw!r} accepted as {data.count}")
    return data.count
