"""
Conformance test hooks.

Withdrawal destinations that select a deterministic outcome instead of
normal processing. Conformance suites rely on these exact values, so
they are part of the public API:

- ``want_error``: processing fails with status 400, no withdrawal is built
- ``want_pending``: the withdrawal is returned Pending, without delay

Every other destination is processed normally and completes.
"""

from enum import StrEnum


WANT_ERROR = "want_error"
WANT_PENDING = "want_pending"

WANT_ERROR_MESSAGE = "as requested, withdrawal failed with error!"


class DestinationOutcome(StrEnum):
    """Outcome selected by a withdrawal destination."""

    ERROR = "error"
    PENDING = "pending"
    PROCESS = "process"


def outcome_for(destination: str) -> DestinationOutcome:
    """
    Map a destination to the outcome it selects.

    Matching is exact: no trimming, no case folding.

    Args:
        destination: Withdrawal destination

    Returns:
        DestinationOutcome for the destination
    """
    if destination == WANT_ERROR:
        return DestinationOutcome.ERROR
    if destination == WANT_PENDING:
        return DestinationOutcome.PENDING
    return DestinationOutcome.PROCESS
