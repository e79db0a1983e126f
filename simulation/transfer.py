import logging
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, StrictInt, field_validator

from .errors import InsufficientFundsError, PreconditionError
from .log_recorder import LogRecorder, Severity
from .session import SessionManager

logger = logging.getLogger(__name__)

BANK_ORIGIN = "YourBank.com"
EVIL_ORIGIN = "EvilSite.com"
SESSION_COOKIE = "session=abc123"
TOKEN_HEADER = "X-CSRF-TOKEN"


class Origin(str, Enum):
    LEGITIMATE = "legitimate"
    MALICIOUS = "malicious"


class TransferRequest(BaseModel):
    origin: Origin
    amount: StrictInt

    @field_validator("amount")
    @classmethod
    def amount_must_be_positive(cls, v):
        if v <= 0:
            raise ValueError("Amount must be a positive integer")
        return v


@dataclass(frozen=True)
class TransferOutcome:
    allowed: bool
    balance: int


class TransferSimulator:
    """
    Decides what happens to a transfer request sent to YourBank.com.

    A request carries two things the server could check: the session cookie,
    which the browser attaches no matter which page sent the request, and the
    X-CSRF-TOKEN header, which only YourBank's own JavaScript can set. The
    vulnerable site only looks at the cookie. The protected site also
    requires the header to match the token issued at login.

    Nothing is sent anywhere: (mode, origin) picks a fixed narrative for the
    request log and a balance transition.
    """

    def __init__(self, sessions: SessionManager, log: LogRecorder):
        self.sessions = sessions
        self.log = log

    def simulate(self, origin, amount) -> TransferOutcome:
        request = TransferRequest(origin=origin, amount=amount)
        session = self.sessions.session

        if not session.logged_in:
            raise PreconditionError("You need to be logged in to send a transfer")
        # the protected site blocks the attack whatever the amount
        blocked = request.origin is Origin.MALICIOUS and self.sessions.modes.is_protected
        if not blocked and request.amount > session.balance:
            raise InsufficientFundsError(request.amount, session.balance)

        if request.origin is Origin.LEGITIMATE:
            allowed = self._legitimate(request.amount)
        else:
            allowed = self._malicious(request.amount)

        if allowed:
            self.sessions.debit(request.amount)

        logger.info(
            "%s transfer of %d in %s mode: %s",
            request.origin.value,
            request.amount,
            self.sessions.modes.mode.value,
            "allowed" if allowed else "blocked",
        )
        return TransferOutcome(allowed=allowed, balance=session.balance)

    def _legitimate(self, amount):
        self.log.append(f"📤 Legitimate request from {BANK_ORIGIN}", Severity.INFO)
        self.log.append(f"🍪 Cookie: {SESSION_COOKIE} (sent automatically)", Severity.INFO)

        if self.sessions.modes.is_protected:
            token = self.sessions.session.csrf_token
            self.log.append(
                f"🔑 Header: {TOKEN_HEADER}={token} (added by your JS)", Severity.INFO
            )
            self.log.append(
                "✅ Server validated: Cookie token matches header token",
                Severity.SUCCESS,
            )

        self.log.append(f"✅ Transfer successful! ${amount} sent", Severity.SUCCESS)
        return True

    def _malicious(self, amount):
        self.log.append(f"🚨 Malicious request from {EVIL_ORIGIN}", Severity.DANGER)
        self.log.append(
            f"🍪 Cookie: {SESSION_COOKIE} (browser sends automatically!)",
            Severity.WARNING,
        )

        if self.sessions.modes.is_protected:
            # the attacker's page cannot read YourBank's cookies, so no header
            self.log.append(
                f"❌ Header: {TOKEN_HEADER}=missing (attacker can't read cookie!)",
                Severity.DANGER,
            )
            self.log.append(
                "🛡️ Server rejected: No CSRF token in header", Severity.DANGER
            )
            self.log.append("❌ Transfer blocked!", Severity.SUCCESS)
            return False

        self.log.append(
            "⚠️ No CSRF protection - request looks legitimate!", Severity.WARNING
        )
        self.log.append(
            "💸 Transfer successful! You just got hacked!",
            Severity.DANGER,
        )
        return True
