class InvariantViolation(ValueError):
    """A domain rule was broken. ``field`` names the offending input, if any."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
