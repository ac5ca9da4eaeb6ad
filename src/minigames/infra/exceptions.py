class TuningDecodeError(Exception):
    """Raised when a tuning file is malformed or holds values the physics cannot use."""


class TuningEncodeError(Exception):
    """Raised when a Tuning cannot be turned into its JSON form."""


class TuningSaveError(Exception):
    """Raised when writing a tuning file fails."""
