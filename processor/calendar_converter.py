"""Converter that rewrites Somtoday timetable calendars."""
import logging
import uuid
from typing import Any, Dict

from icalendar import Calendar, Event, Parameters
from icalendar.prop import vInline

from processor.errors import MissingRequiredProperty
from processor.ical_reader import unescape_text
from processor.models import RawCalendar, RawEvent, SubjectDictionary
from processor.properties import extract_parameters, extract_properties
from processor.transformers import normalize_location, transform_summary

logger = logging.getLogger(__name__)

CALENDAR_VERSION = '2.0'
DEFAULT_PRODID = '-//calconv//somtoday//NL'


def _verbatim(value: str, params: Dict[str, Any]) -> vInline:
    """Wrap a wire value so it is serialized exactly as read."""
    prop = vInline(value)
    prop.params = Parameters(params)
    return prop


class CalendarConverter:
    """Converter from Somtoday calendars to cleaned calendars."""

    REQUIRED_EVENT_PROPERTIES = ('DTSTAMP', 'UID')
    SEEDED_CALENDAR_PROPERTIES = ('VERSION', 'PRODID')

    def __init__(self, subjects: SubjectDictionary, prodid: str = DEFAULT_PRODID):
        """
        Initialize the converter.

        Args:
            subjects: Subject dictionary used to name lessons
            prodid: PRODID written to every output calendar
        """
        self.subjects = subjects
        self.prodid = prodid

    def convert_calendar(self, raw_calendar: RawCalendar) -> str:
        """
        Convert a calendar and serialize the result.

        The first event that fails aborts the whole conversion.

        Args:
            raw_calendar: Parsed source calendar

        Returns:
            Output calendar as iCalendar text

        Raises:
            ConversionError: If a property value or required property is missing
        """
        properties = extract_properties(raw_calendar.properties)
        params = extract_parameters(raw_calendar.properties)

        calendar = Calendar()
        calendar.add('prodid', self.prodid)
        calendar.add('version', CALENDAR_VERSION)
        for name, value in properties.items():
            if name in self.SEEDED_CALENDAR_PROPERTIES:
                continue
            calendar[name] = _verbatim(value, params[name])

        for timezone in raw_calendar.timezones:
            calendar.add_component(timezone)

        for raw_event in raw_calendar.events:
            calendar.add_component(self.convert_event(raw_event))

        logger.info(f"Converted calendar with {len(raw_calendar.events)} events")
        return calendar.to_ical().decode('utf-8')

    def convert_event(self, raw_event: RawEvent) -> Event:
        """
        Convert a single event.

        Args:
            raw_event: Parsed source event

        Returns:
            Event with a derived UID and rewritten SUMMARY, DESCRIPTION
            and LOCATION

        Raises:
            MissingPropertyValue: If a property has no value
            MissingRequiredProperty: If DTSTAMP or UID is absent
        """
        properties = extract_properties(raw_event.properties)
        params = extract_parameters(raw_event.properties)

        for name in self.REQUIRED_EVENT_PROPERTIES:
            if name not in properties:
                raise MissingRequiredProperty(name)

        converted = {}
        if 'SUMMARY' in properties:
            converted.update(transform_summary(properties['SUMMARY'], self.subjects))
        if 'LOCATION' in properties:
            converted['LOCATION'] = normalize_location(properties['LOCATION'])
        properties.update(converted)

        event = Event()
        event.add('uid', self.generate_event_id(unescape_text(properties['UID'])))
        event['DTSTAMP'] = _verbatim(properties['DTSTAMP'], params['DTSTAMP'])

        for name, value in properties.items():
            if name in self.REQUIRED_EVENT_PROPERTIES:
                continue
            if name in converted:
                event.add(name, value)
            else:
                event[name] = _verbatim(value, params.get(name, {}))

        return event

    @staticmethod
    def generate_event_id(original_uid: str) -> str:
        """
        Derive a stable UID from the source event UID.

        Args:
            original_uid: UID of the source event

        Returns:
            Version 5 UUID in the OID namespace, hyphenated
        """
        return str(uuid.uuid5(uuid.NAMESPACE_OID, original_uid))
