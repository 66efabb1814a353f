"""
API models.

Wire types shared by the HTTP surface and the authorization service
client. All models serialize to and from JSON with pydantic.
"""

from enum import StrEnum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
)


U64_MAX = 2**64 - 1


class WithdrawalState(StrEnum):
    """Withdrawal lifecycle state."""

    PENDING = "Pending"
    COMPLETE = "Complete"


class Status(BaseModel):
    """Uniform error envelope returned for every failed request."""

    code: int = Field(..., description="HTTP-style status code")
    desc: str = Field(..., description="Human-readable description")


class BuyParams(BaseModel):
    """Query parameters of the access key purchase endpoint."""

    quantity: int = Field(..., ge=0, le=U64_MAX, description="Number of operations")


class AccesskeyRequest(BaseModel):
    """Access key issuance request sent to the authorization service."""

    model_config = ConfigDict(frozen=True)

    quantity: int = Field(..., ge=0, le=U64_MAX, description="Number of operations")
    pof_type: str = Field(..., description="Proof-of-function tag")
    duration: int = Field(..., ge=0, description="Key lifetime in seconds")


class Accesskey(BaseModel):
    """Access key issued by the authorization service.

    The gateway treats the key as opaque: whatever fields the
    authorization service returns are kept and passed back unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="allow")


class WithdrawalRequest(BaseModel):
    """Caller's request to redeem value to a destination.

    Extra metadata fields are accepted and echoed back in the
    resulting withdrawal. Serialization reproduces the request as the
    caller sent it: declared fields the caller left out are omitted.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    destination: str = Field(..., description="Withdrawal destination")
    amount: int | None = Field(
        default=None, ge=0, le=U64_MAX, description="Amount in base units"
    )

    @model_serializer(mode="wrap")
    def serialize_as_sent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        """Drop declared fields that were not set by the caller."""
        data = handler(self)
        unset = set(type(self).model_fields) - self.model_fields_set
        return {key: value for key, value in data.items() if key not in unset}


class WithdrawalStateData(BaseModel):
    """State of a withdrawal at a point in time."""

    model_config = ConfigDict(frozen=True)

    state: WithdrawalState
    state_changed: int = Field(..., ge=0, description="Unix timestamp of the last state change")


class Withdrawal(BaseModel):
    """Processed withdrawal.

    Built once per successful processing call and never mutated.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Random withdrawal identifier")
    state_data: WithdrawalStateData
    withdrawal_request: WithdrawalRequest
    receipt: str
