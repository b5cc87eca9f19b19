"""Exceptions raised while converting calendars."""


class CalconvError(Exception):
    """Base class for all conversion failures."""

    kind = 'internal-error'


class ConverterNotFound(CalconvError):
    """No converter is registered under the requested name."""

    kind = 'converter-not-found'

    def __init__(self, name: str):
        super().__init__(f"Unknown converter: {name}")
        self.name = name


class FetchError(CalconvError):
    """The source calendar could not be downloaded."""

    kind = 'fetch-error'


class NoCalendarFound(CalconvError):
    """The source document parsed but holds no VCALENDAR."""

    kind = 'no-calendar-found'


class CalendarParseError(CalconvError):
    """The source document is not valid iCalendar."""

    kind = 'parse-error'


class ConversionError(CalconvError):
    """A calendar or event could not be converted."""

    kind = 'conversion-error'


class MissingPropertyValue(ConversionError):
    """A property was present without a value."""

    def __init__(self, name: str):
        super().__init__(f"Property {name} has no value")
        self.name = name


class MissingRequiredProperty(ConversionError):
    """An event lacks UID or DTSTAMP."""

    def __init__(self, name: str):
        super().__init__(f"Event is missing required property {name}")
        self.name = name


class InternalError(CalconvError):
    """Unexpected failure inside the conversion pipeline."""

    kind = 'internal-error'


class SubjectConfigError(CalconvError):
    """The subject names configuration could not be loaded."""

    kind = 'internal-error'
