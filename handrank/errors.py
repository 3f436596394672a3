from __future__ import annotations


class InvalidToken(ValueError):
    """A card token whose value or suit symbol is not recognised."""


class MalformedHand(ValueError):
    """Hand text that does not describe exactly five distinct valid cards."""
