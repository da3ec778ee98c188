"""Key events and the decoder that produces them from raw terminal bytes."""

from . import events
from .decoder import KeyDecoder, ReadByte
from .events import KeyInput, ctrl_code

__all__ = ["events", "KeyDecoder", "ReadByte", "KeyInput", "ctrl_code"]
