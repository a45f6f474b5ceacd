"""Gift card domain specific exceptions."""


class GiftCardError(Exception):
    """Base class for gift card domain errors."""


class GiftCardNotFoundError(GiftCardError):
    """Raised when no gift card matches the requested id or code."""


class GiftCardStateError(GiftCardError):
    """Raised when the card's status does not allow the requested operation."""
