import logging
import threading
from typing import List, Optional

from pydantic import BaseModel

from config import SECURE_MODE, STARTING_BALANCE
from utils import generate_csrf_token

from .log_recorder import LogRecorder
from .modes import Mode, ModeSelector
from .session import SessionManager
from .transfer import Origin, TransferOutcome, TransferSimulator

logger = logging.getLogger(__name__)


class LogEntryView(BaseModel):
    message: str
    severity: str
    timestamp: str


class SimulationState(BaseModel):
    """Everything a presentation layer is allowed to see"""

    logged_in: bool
    balance: int
    mode: Mode
    csrf_token: Optional[str] = None
    log: List[LogEntryView] = []
    # the attack button only works while someone is logged in
    attack_enabled: bool = False


class CSRFSimulator:
    """
    Single owner of the session, mode and request log.

    State changes only through login(), logout(), set_mode() and
    simulate_transfer(). Each one runs under the same lock and, once it has
    finished, every subscriber is called with a fresh SimulationState.
    """

    def __init__(
        self,
        mode=None,
        starting_balance=STARTING_BALANCE,
        token_factory=generate_csrf_token,
        clock=None,
    ):
        if mode is None:
            mode = Mode.PROTECTED if SECURE_MODE else Mode.VULNERABLE

        self._lock = threading.RLock()
        self._subscribers = []

        self.log = LogRecorder(clock=clock)
        self.modes = ModeSelector(mode)
        self.sessions = SessionManager(
            self.modes,
            self.log,
            starting_balance=starting_balance,
            token_factory=token_factory,
        )
        self.transfers = TransferSimulator(self.sessions, self.log)

    def login(self) -> SimulationState:
        with self._lock:
            self.sessions.login()
            return self._publish()

    def logout(self) -> SimulationState:
        with self._lock:
            self.sessions.logout()
            return self._publish()

    def set_mode(self, mode) -> SimulationState:
        with self._lock:
            self.sessions.set_mode(mode)
            return self._publish()

    def simulate_transfer(self, origin: Origin, amount: int) -> TransferOutcome:
        with self._lock:
            outcome = self.transfers.simulate(origin, amount)
            self._publish()
            return outcome

    def state(self) -> SimulationState:
        with self._lock:
            session = self.sessions.session
            return SimulationState(
                logged_in=session.logged_in,
                balance=session.balance,
                mode=self.modes.mode,
                csrf_token=session.csrf_token,
                log=[LogEntryView(**entry.to_dict()) for entry in self.log],
                attack_enabled=session.logged_in,
            )

    def subscribe(self, callback):
        """Call `callback(state)` after every operation. Returns an unsubscribe function."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe():
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self) -> SimulationState:
        snapshot = self.state()
        # the operation is already applied at this point
        for callback in list(self._subscribers):
            try:
                callback(snapshot)
            except Exception:
                logger.exception("Subscriber %r failed", callback)
        return snapshot
