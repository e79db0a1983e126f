from typing import Optional

from pydantic import BaseModel, StrictInt, field_validator

from simulation import Mode


class ModeFormModel(BaseModel):
    """
    Pydantic model for the body of POST /api/simulator/mode
    """

    mode: Mode

    @field_validator("mode", mode="before")
    @classmethod
    def normalize_mode(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class TransferFormModel(BaseModel):
    """
    Pydantic model for the transfer bodies. The amount is optional, the
    route falls back to the demo default for the origin.
    """

    amount: Optional[StrictInt] = None

    @field_validator("amount")
    @classmethod
    def amount_must_be_positive(cls, v):
        # negative amounts would turn a transfer into a deposit
        if v is not None and v <= 0:
            raise ValueError("Amount must be a positive integer")
        return v
