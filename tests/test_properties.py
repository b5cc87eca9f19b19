"""Unit tests for property extraction."""
import pytest

from processor.errors import MissingPropertyValue
from processor.models import RawProperty
from processor.properties import extract_parameters, extract_properties


class TestExtractProperties:
    """Test cases for extract_properties."""

    def test_extract_properties_builds_mapping(self):
        """Test that every property ends up in the mapping."""
        raw = [
            RawProperty('UID', 'abc@somtoday'),
            RawProperty('SUMMARY', 'WISK - WIS3A2 - jdoe'),
            RawProperty('LOCATION', 'a1234'),
        ]

        properties = extract_properties(raw)

        assert properties == {
            'UID': 'abc@somtoday',
            'SUMMARY': 'WISK - WIS3A2 - jdoe',
            'LOCATION': 'a1234',
        }

    def test_extract_properties_order_insensitive(self):
        """Test that input order does not change the result."""
        raw = [
            RawProperty('UID', 'abc'),
            RawProperty('DTSTAMP', '20240110T120000Z'),
        ]

        assert extract_properties(raw) == extract_properties(list(reversed(raw)))

    def test_extract_properties_last_duplicate_wins(self):
        """Test that a repeated name keeps the last value."""
        raw = [
            RawProperty('CATEGORIES', 'first'),
            RawProperty('CATEGORIES', 'second'),
        ]

        assert extract_properties(raw) == {'CATEGORIES': 'second'}

    def test_extract_properties_missing_value(self):
        """Test that a property without value aborts extraction."""
        raw = [
            RawProperty('UID', 'abc'),
            RawProperty('DESCRIPTION', None),
            RawProperty('LOCATION', None),
        ]

        with pytest.raises(MissingPropertyValue) as exc_info:
            extract_properties(raw)

        assert exc_info.value.name == 'DESCRIPTION'
        assert exc_info.value.kind == 'conversion-error'

    def test_extract_properties_empty(self):
        """Test extraction of an empty property list."""
        assert extract_properties([]) == {}


def test_extract_parameters_last_duplicate_wins():
    """Test parameter collection per property name."""
    raw = [
        RawProperty('DTSTART', '20240115T083000', {'TZID': 'Europe/London'}),
        RawProperty('DTSTART', '20240115T083000', {'TZID': 'Europe/Amsterdam'}),
        RawProperty('SUMMARY', 'Study Hall'),
    ]

    params = extract_parameters(raw)

    assert params == {
        'DTSTART': {'TZID': 'Europe/Amsterdam'},
        'SUMMARY': {},
    }
