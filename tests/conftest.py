"""Shared fixtures."""
import pytest


SAMPLE_ICS = "\r\n".join([
    "BEGIN:VCALENDAR",
    "VERSION:2.0",
    "PRODID:-//Somtoday//Rooster//NL",
    "X-WR-CALNAME:Rooster",
    "BEGIN:VTIMEZONE",
    "TZID:Europe/Amsterdam",
    "BEGIN:STANDARD",
    "DTSTART:19701025T030000",
    "TZOFFSETFROM:+0200",
    "TZOFFSETTO:+0100",
    "END:STANDARD",
    "END:VTIMEZONE",
    "BEGIN:VEVENT",
    "UID:les-1@somtoday.nl",
    "DTSTAMP:20240110T120000Z",
    "DTSTART;TZID=Europe/Amsterdam:20240115T083000",
    "DTEND;TZID=Europe/Amsterdam:20240115T092000",
    "SUMMARY:WISK - WIS3A2\\, WIS3B1 - jdoe",
    "LOCATION:a1234\\, b2",
    "END:VEVENT",
    "BEGIN:VEVENT",
    "UID:les-2@somtoday.nl",
    "DTSTAMP:20240110T120000Z",
    "DTSTART;TZID=Europe/Amsterdam:20240115T093000",
    "DTEND;TZID=Europe/Amsterdam:20240115T102000",
    "SUMMARY:Study Hall",
    "DESCRIPTION:Zelfstudie",
    "END:VEVENT",
    "END:VCALENDAR",
    "",
])


@pytest.fixture
def sample_ics():
    """Somtoday style calendar with a lesson and a study hour."""
    return SAMPLE_ICS
