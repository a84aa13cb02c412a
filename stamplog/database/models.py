"""Record type persisted by the timestamp repository."""

import uuid
from dataclasses import asdict, dataclass
from typing import Dict


def new_record_id() -> str:
    return uuid.uuid4().hex


@dataclass
class TimestampRecord:
    """
    One recorded instant.

    Attributes:
        id: Stable identifier, unique within the log
        time: ISO-8601 UTC instant with millisecond precision, e.g. 2025-06-20T14:03:05.123Z
        note: Free-text annotation, empty when unset
    """

    id: str
    time: str
    note: str = ""

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)
