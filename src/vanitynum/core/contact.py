"""Adapter from call-platform contact events to vanity results."""

from typing import Any, Dict, Optional

from ..config import DEFAULT_RESULT_COUNT, MESSAGE_TOP_COUNT
from ..utils.logging import get_logger
from .generator import get_vanity_numbers
from .word_index import WordIndex

logger = get_logger(__name__)

CALLER_REQUIRED = "callerNumber required"
MESSAGE_PREFIX = "Here is the top 3 vanity numbers for your phone: "


def _lookup(data: Any, *keys: str) -> Optional[Any]:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def resolve_caller_number(event: Optional[Dict[str, Any]]) -> Optional[str]:
    """Caller number from flow parameters, the customer endpoint, or the top level."""
    return (
        _lookup(event, "Details", "Parameters", "callerNumber")
        or _lookup(event, "Details", "ContactData", "CustomerEndpoint", "Address")
        or _lookup(event, "callerNumber")
        or None
    )


def build_message(vanity_numbers) -> str:
    return MESSAGE_PREFIX + ", ".join(vanity_numbers[:MESSAGE_TOP_COUNT])


def handle_contact_event(
    event: Optional[Dict[str, Any]],
    index: Optional[WordIndex] = None,
    n: int = DEFAULT_RESULT_COUNT,
) -> Dict[str, Any]:
    """Vanity numbers for the caller of ``event`` plus a message to read back."""
    caller = resolve_caller_number(event)
    logger.info(f"Resolved caller number: {caller}")

    if not caller:
        return {"message": CALLER_REQUIRED, "error": CALLER_REQUIRED}

    vanity_numbers = get_vanity_numbers(str(caller), n=n, index=index)
    logger.info(f"Top {n}: {vanity_numbers}")
    return {
        "message": build_message(vanity_numbers),
        "vanityNumbers": vanity_numbers,
    }
