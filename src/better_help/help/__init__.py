"""Help replies and corpus lifecycle."""

from better_help.help.responder import HelpReply, HelpResponder
from better_help.help.service import HelpService, HelpSnapshot

__all__ = [
    "HelpReply",
    "HelpResponder",
    "HelpService",
    "HelpSnapshot",
]
