from .errors import InsufficientFundsError, PreconditionError, SimulationError
from .log_recorder import LogEntry, LogRecorder, Severity
from .modes import Mode, ModeSelector
from .session import Session, SessionManager
from .simulator import CSRFSimulator, SimulationState
from .transfer import Origin, TransferOutcome, TransferRequest, TransferSimulator

__all__ = [
    "CSRFSimulator",
    "SimulationState",
    "Mode",
    "ModeSelector",
    "Origin",
    "TransferRequest",
    "TransferOutcome",
    "TransferSimulator",
    "Session",
    "SessionManager",
    "LogEntry",
    "LogRecorder",
    "Severity",
    "SimulationError",
    "PreconditionError",
    "InsufficientFundsError",
]
