"""Admin service for gift cards, wallet ledgers and moderation settings."""

__version__ = "0.1.0"
