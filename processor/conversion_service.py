"""Fetch, parse and convert pipeline behind the /conv endpoint."""
import logging
import time
from typing import Callable, Dict

import requests

from processor.calendar_converter import DEFAULT_PRODID, CalendarConverter
from processor.errors import (
    CalconvError,
    ConverterNotFound,
    FetchError,
    InternalError,
    NoCalendarFound,
)
from processor.ical_reader import parse_calendars
from processor.models import SubjectDictionary

logger = logging.getLogger(__name__)

CONVERTERS: Dict[str, Callable[..., CalendarConverter]] = {
    'somtoday': CalendarConverter,
}


class ConversionService:
    """Runs one calendar conversion per request."""

    def __init__(self, fetcher, subjects: SubjectDictionary, prodid: str = DEFAULT_PRODID):
        """
        Initialize the conversion service.

        Args:
            fetcher: Object with a fetch(url) method returning document text
            subjects: Subject dictionary shared by all conversions
            prodid: PRODID written to output calendars
        """
        self.fetcher = fetcher
        self.subjects = subjects
        self.prodid = prodid

    def convert(self, converter_name: str, url: str) -> str:
        """
        Fetch the calendar at url and convert it.

        Args:
            converter_name: Name of a registered converter
            url: URL of the source calendar

        Returns:
            Converted calendar as iCalendar text

        Raises:
            CalconvError: Subclass tagged with the kind of failure
        """
        factory = CONVERTERS.get(converter_name)
        if factory is None:
            raise ConverterNotFound(converter_name)

        start_time = time.time()
        try:
            text = self.fetcher.fetch(url)
        except CalconvError:
            raise
        except requests.RequestException as e:
            raise FetchError(f"Error while receiving calendar: {e}") from e

        try:
            calendars = parse_calendars(text)
            if not calendars:
                raise NoCalendarFound("No calendar found in document")

            converter = factory(self.subjects, prodid=self.prodid)
            result = converter.convert_calendar(calendars[0])
        except CalconvError:
            raise
        except Exception as e:
            raise InternalError(f"Unexpected error during conversion: {e}") from e

        logger.info(
            f"Conversion with {converter_name} completed",
            extra={
                'converter': converter_name,
                'calendars_found': len(calendars),
                'duration_seconds': round(time.time() - start_time, 2)
            }
        )
        return result
