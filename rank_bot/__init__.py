"""Discord slash-command bot reporting Valorant competitive ranks."""

__version__ = "1.0.0"
