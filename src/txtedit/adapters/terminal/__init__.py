"""Raw terminal adapter: device I/O, the interaction loop and the entry point."""

from .controller import EditorController, TerminalIO
from .io import Terminal, TerminalError

__all__ = ["EditorController", "TerminalIO", "Terminal", "TerminalError"]
