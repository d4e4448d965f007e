from dataclasses import dataclass
from typing import Any

from paracodec.core.models.exchange import Exchange
from paracodec.core.models.message import Message


@dataclass(frozen=True, slots=True)
class SameExchange:
    """The data format already populated the exchange's out-message itself."""
    exchange: Exchange


@dataclass(frozen=True, slots=True)
class ReplacementMessage:
    """The returned message becomes the exchange's out-message as a whole."""
    message: Message


@dataclass(frozen=True, slots=True)
class DecodedValue:
    """The decoded body, to be placed into the prepared out-message."""
    value: Any


DecodeResult = SameExchange | ReplacementMessage | DecodedValue


def as_result(obj: Any) -> DecodeResult:
    """
    Normalise whatever a data format returned into a DecodeResult.

    Data formats are free to return one of the variants explicitly, or a
    bare value: an Exchange means SameExchange, a Message means
    ReplacementMessage, anything else is the decoded body.
    """
    if isinstance(obj, (SameExchange, ReplacementMessage, DecodedValue)):
        return obj
    if isinstance(obj, Exchange):
        return SameExchange(obj)
    if isinstance(obj, Message):
        return ReplacementMessage(obj)
    return DecodedValue(obj)
