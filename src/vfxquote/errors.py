"""Exception hierarchy for VFX Quote."""


class VFXQuoteError(Exception):
    """Base class for all errors raised by VFX Quote."""


class PricingError(VFXQuoteError):
    """Raised when the pricing engine receives a value outside a table's domain."""


class InterchangeError(VFXQuoteError):
    """Raised when an imported project payload is malformed."""


class SceneError(VFXQuoteError):
    """Raised for invalid scene-list operations (unknown id, last scene)."""


class ConfigError(VFXQuoteError):
    """Raised when a configuration file cannot be read or holds invalid values."""
