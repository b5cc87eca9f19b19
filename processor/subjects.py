"""Resolution of Somtoday cluster group codes to subject names."""
import logging
from typing import Sequence

from processor.models import SubjectDictionary

logger = logging.getLogger(__name__)

UNKNOWN_SUBJECT = 'Onbekend vak'


def group_name_from_code(group_code: str) -> str:
    """
    Strip whitespace and trailing digits from a group code.

    Args:
        group_code: Cluster group code such as "WIS3A2"

    Returns:
        Group name such as "WIS3A", possibly empty
    """
    return group_code.strip().rstrip('0123456789')


def resolve_subject(
    group_codes: Sequence[str],
    subjects: SubjectDictionary,
    fallback: str = UNKNOWN_SUBJECT
) -> str:
    """
    Determine the subject name for an event from its cluster groups.

    Only the first group code is used; the remaining codes belong to the
    same lesson and are listed in the description instead.

    Args:
        group_codes: Group codes in the order they appear in the summary
        subjects: Subject dictionary to search
        fallback: Name returned when no group can be resolved

    Returns:
        Subject name from the dictionary, the bare group name when no
        entry matches, or the fallback
    """
    if not group_codes:
        return fallback

    group_name = group_name_from_code(group_codes[0])
    if not group_name:
        logger.debug(f"Group code {group_codes[0]!r} has no group name")
        return fallback

    subject = subjects.lookup(group_name)
    if subject is None:
        logger.debug(f"No subject configured for group {group_name}")
        return group_name
    return subject
