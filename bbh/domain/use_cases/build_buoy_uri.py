"""Use case for building a date-windowed buoy query URI."""

import logging
from datetime import date, datetime
from typing import Union
from ..exceptions import InvalidDateFormat

logger = logging.getLogger(__name__)

BEGIN_TOKEN = "[BEGIN]"
END_TOKEN = "[END]"
DATE_FORMAT = "%Y-%m-%d"


def format_date(value: Union[str, date]) -> str:
    """
    Validate a calendar date and return it as YYYY-mm-dd.

    Strings must already be zero-padded ISO dates and are returned
    unchanged; date objects are formatted.

    Raises:
        InvalidDateFormat: If the value is not a YYYY-mm-dd calendar date
    """
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    message = f"Date must be a calendar date as YYYY-mm-dd, got: {value!r}"
    try:
        parsed = datetime.strptime(str(value), DATE_FORMAT)
    except ValueError:
        raise InvalidDateFormat(message) from None
    # strptime also accepts unpadded fields such as 2001-7-9
    if parsed.strftime(DATE_FORMAT) != str(value):
        raise InvalidDateFormat(message)
    return str(value)


class BuildBuoyUriUseCase:
    """Use case to substitute begin/end dates into a query template."""

    def __init__(self, template: str):
        """
        Initialize use case.

        Args:
            template: URI template containing one [BEGIN] and one [END] token
        """
        self.template = template

    def execute(self, begin: Union[str, date], end: Union[str, date]) -> str:
        """
        Execute the use case.

        Args:
            begin: The starting date as YYYY-mm-dd
            end: The end date as YYYY-mm-dd

        Returns:
            The query URI
        """
        begin = format_date(begin)
        end = format_date(end)
        uri = self.template.replace(BEGIN_TOKEN, begin, 1).replace(END_TOKEN, end, 1)
        logger.debug(f"Built buoy URI for {begin} to {end}: {uri}")
        return uri
