import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    INFO = "info"
    SUCCESS = "success"
    DANGER = "danger"
    WARNING = "warning"


@dataclass(frozen=True)
class LogEntry:
    message: str
    severity: Severity
    timestamp: str

    def to_dict(self):
        data = asdict(self)
        data["severity"] = self.severity.value
        return data


def _wall_clock():
    return datetime.now().strftime("%H:%M:%S")


class LogRecorder:
    """
    Append-only request log shown next to the simulated bank.

    Entries keep the order in which they were appended; the only way to
    remove them is clear(), which the session manager calls on login and
    logout.
    """

    def __init__(self, clock: Optional[Callable[[], str]] = None):
        self._clock = clock or _wall_clock
        self._entries: List[LogEntry] = []

    def append(self, message: str, severity: Severity = Severity.INFO) -> LogEntry:
        entry = LogEntry(message=message, severity=Severity(severity), timestamp=self._clock())
        self._entries.append(entry)
        logger.debug("[%s] %s", entry.severity.value, entry.message)
        return entry

    def clear(self):
        self._entries.clear()

    def entries(self) -> List[LogEntry]:
        return list(self._entries)

    def __iter__(self):
        return iter(self.entries())

    def __len__(self):
        return len(self._entries)
