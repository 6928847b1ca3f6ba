"""Session state, listeners and shareable state encoding."""

from .model import Session
from .observer import BaseObserver
from .state import StatePayload, decode_state, encode_state

__all__ = ["Session", "BaseObserver", "StatePayload", "decode_state", "encode_state"]
