"""Engine error types."""


class InvalidInputError(ValueError):
    """An input field holds a value the engine cannot evaluate.

    Raised at the engine boundary, before any derived quantity is computed.
    """

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}={value!r}: {reason}")
