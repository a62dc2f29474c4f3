"""better-help - searchable help for chat-bot scripts."""

__version__ = "0.1.0"
