"""Reading iCalendar documents into raw calendar records."""
import logging
from typing import List

from icalendar import Calendar
from icalendar.prop import vText

from processor.errors import CalendarParseError
from processor.models import RawCalendar, RawEvent, RawProperty

logger = logging.getLogger(__name__)


def parse_calendars(text: str) -> List[RawCalendar]:
    """
    Parse an iCalendar document.

    Args:
        text: Document text, possibly holding several VCALENDAR blocks

    Returns:
        List of RawCalendar objects in document order

    Raises:
        CalendarParseError: If the document cannot be parsed
    """
    try:
        components = Calendar.from_ical(text, multiple=True)
    except Exception as e:
        raise CalendarParseError(f"Failed to parse calendar: {e}") from e

    calendars = []
    for component in components:
        if component.name != 'VCALENDAR':
            logger.debug(f"Skipping top level {component.name} component")
            continue
        calendars.append(_read_calendar(component))

    logger.info(f"Parsed {len(calendars)} calendars")
    return calendars


def _read_calendar(component) -> RawCalendar:
    events = []
    timezones = []
    for sub in component.subcomponents:
        if sub.name == 'VEVENT':
            events.append(RawEvent(properties=_read_properties(sub)))
        elif sub.name == 'VTIMEZONE':
            timezones.append(sub)

    return RawCalendar(
        properties=_read_properties(component),
        events=events,
        timezones=timezones
    )


def _read_properties(component) -> List[RawProperty]:
    """
    Read the properties of a component in wire form.

    Repeated properties are returned once per occurrence, in order.
    """
    properties = []
    for name, values in component.items():
        if not isinstance(values, list):
            values = [values]
        for value in values:
            properties.append(_to_raw_property(name, value))
    return properties


def _to_raw_property(name: str, value) -> RawProperty:
    if hasattr(value, 'to_ical'):
        wire = value.to_ical()
    else:
        wire = value
    if isinstance(wire, bytes):
        wire = wire.decode('utf-8')
    else:
        wire = str(wire)

    params = getattr(value, 'params', None) or {}
    return RawProperty(
        name=name.upper(),
        value=wire if wire else None,
        params=dict(params)
    )


def unescape_text(value: str) -> str:
    """Undo iCalendar TEXT escaping of a wire value."""
    return str(vText.from_ical(value))
