"""Conversion of raw property lists into name/value mappings."""
from typing import Any, Dict, Iterable

from processor.errors import MissingPropertyValue
from processor.models import RawProperty


def extract_properties(raw_properties: Iterable[RawProperty]) -> Dict[str, str]:
    """
    Build a name to value mapping from raw properties.

    A later property with the same name replaces an earlier one.

    Raises:
        MissingPropertyValue: For the first property that has no value
    """
    properties = {}
    for prop in raw_properties:
        if prop.value is None:
            raise MissingPropertyValue(prop.name)
        properties[prop.name] = prop.value
    return properties


def extract_parameters(raw_properties: Iterable[RawProperty]) -> Dict[str, Dict[str, Any]]:
    """Collect property parameters by name, last one wins."""
    return {prop.name: dict(prop.params) for prop in raw_properties}
