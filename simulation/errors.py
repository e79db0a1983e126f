class SimulationError(Exception):
    """Base class for errors raised by the simulation core."""


class PreconditionError(SimulationError):
    """An operation was invoked in a state that does not allow it."""


class InsufficientFundsError(PreconditionError):
    def __init__(self, amount, balance):
        super().__init__(
            f"Transfer of ${amount} exceeds the current balance of ${balance}"
        )
        self.amount = amount
        self.balance = balance
