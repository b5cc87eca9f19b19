"""Rewriting of Somtoday SUMMARY and LOCATION values."""
from typing import Dict

from processor.models import SubjectDictionary
from processor.subjects import resolve_subject


def clean_value(value: str) -> str:
    """Trim a wire value and drop its escape backslashes."""
    return value.strip().replace('\\', '')


def transform_summary(summary: str, subjects: SubjectDictionary) -> Dict[str, str]:
    """
    Turn an encoded lesson summary into a subject name and description.

    Somtoday summaries look like "WISK - WIS3A2, WIS3B1 - jdoe": a
    subject abbreviation, the cluster groups and the teachers. Summaries
    in any other shape are returned cleaned but otherwise untouched.

    Args:
        summary: SUMMARY value in wire form
        subjects: Subject dictionary used to name the lesson

    Returns:
        Replacement values for SUMMARY and, for lesson summaries, DESCRIPTION
    """
    cleaned = clean_value(summary)
    if '-' not in cleaned:
        return {'SUMMARY': cleaned}

    parts = cleaned.split('-')
    if len(parts) != 3:
        return {'SUMMARY': cleaned}

    groups_str = parts[1].strip()
    teachers_str = parts[2].strip()
    groups = groups_str.split(',')
    teachers = teachers_str.split(',')

    if len(teachers) == 1:
        description = f"Docent: {teachers_str}; "
    else:
        description = f"Docenten: {teachers_str}; "
    if len(groups) == 1:
        description += f"Clustergroep: {groups_str}"
    else:
        description += f"Clustergroepen: {groups_str}"

    return {
        'SUMMARY': resolve_subject(groups, subjects),
        'DESCRIPTION': description
    }


def normalize_location(location: str) -> str:
    """
    Normalize a comma separated list of room codes.

    Five character codes carry a building prefix which is dropped,
    e.g. "a1234" becomes "1234". All codes are uppercased.
    """
    rooms = []
    for room in clean_value(location).split(','):
        room = room.strip()
        if len(room) == 5:
            room = room[1:]
        rooms.append(room.upper())
    return ', '.join(rooms)
