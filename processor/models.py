"""Data models for calendar conversion."""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple


@dataclass
class RawProperty:
    """Property read from a source calendar, value in iCalendar wire form."""
    name: str
    value: Optional[str]
    params: Dict[str, Any] = field(default_factory=dict)


@dataclass
class RawEvent:
    """VEVENT block of a source calendar."""
    properties: List[RawProperty]


@dataclass
class RawCalendar:
    """VCALENDAR block of a source calendar."""
    properties: List[RawProperty]
    events: List[RawEvent]
    timezones: List[Any] = field(default_factory=list)


@dataclass(frozen=True)
class SubjectDictionary:
    """
    Ordered mapping from group code fragments to readable subject names.

    Entries are searched in order and the first key contained in the group
    name wins, so more specific keys must be listed before shorter ones.
    """
    entries: Tuple[Tuple[str, str], ...] = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> 'SubjectDictionary':
        return cls(entries=tuple((str(key), str(value)) for key, value in pairs))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> 'SubjectDictionary':
        return cls.from_pairs(mapping.items())

    def lookup(self, group_name: str) -> Optional[str]:
        """
        Find the subject name for a group name.

        Args:
            group_name: Group code with its trailing digits removed

        Returns:
            Subject name of the first matching entry, or None
        """
        for key, value in self.entries:
            if key in group_name:
                return value
        return None

    def __len__(self) -> int:
        return len(self.entries)
