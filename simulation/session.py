import logging
from dataclasses import dataclass
from typing import Optional

from config import STARTING_BALANCE
from utils import generate_csrf_token

from .log_recorder import LogRecorder, Severity
from .modes import ModeSelector

logger = logging.getLogger(__name__)


@dataclass
class Session:
    logged_in: bool = False
    balance: int = STARTING_BALANCE
    csrf_token: Optional[str] = None


class SessionManager:
    """Login/logout of the simulated YourBank.com account"""

    def __init__(
        self,
        modes: ModeSelector,
        log: LogRecorder,
        starting_balance=STARTING_BALANCE,
        token_factory=generate_csrf_token,
    ):
        self.modes = modes
        self.log = log
        self.starting_balance = starting_balance
        self.token_factory = token_factory
        self.session = Session(balance=starting_balance)

        # switching mode always ends the session
        self.modes.on_switch(self.logout)

    def login(self):
        self.session = Session(logged_in=True, balance=self.starting_balance)
        self.log.clear()

        # the token only exists on the protected site
        if self.modes.is_protected:
            token = self.token_factory()
            self.session.csrf_token = token
            self.log.append(
                f"✅ Login successful! CSRF token generated: {token}",
                Severity.SUCCESS,
            )
        else:
            self.log.append(
                "✅ Login successful! (No CSRF protection)", Severity.SUCCESS
            )
        logger.info("Logged in (mode=%s)", self.modes.mode.value)
        return self.session

    def logout(self):
        self.session = Session(logged_in=False, balance=self.starting_balance)
        self.log.clear()
        logger.info("Logged out")
        return self.session

    def set_mode(self, mode) -> bool:
        return self.modes.select(mode)

    def debit(self, amount: int):
        self.session.balance -= amount
