"""Terminal-resident single-document text editor."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "keymaps",
    "modes",
    "runtime",
    "state",
    "view",
]

__version__ = "0.1.0"
