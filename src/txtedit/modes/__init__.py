"""Editor modes and the dispatch plumbing between them."""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .normal_mode import NormalMode, QUIT_ACTION_ID
from .prompt_mode import PromptCallback, PromptMode, PromptRequest, request_prompt

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "NormalMode",
    "QUIT_ACTION_ID",
    "PromptMode",
    "PromptRequest",
    "PromptCallback",
    "request_prompt",
]
