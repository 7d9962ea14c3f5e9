"""Domain errors for expense aggregation."""


class ValidationError(ValueError):
    """Raised when an expense record or category violates its contract.

    Attributes:
        record_id: Identifier of the offending record, when known.
        field: Name of the offending field.
    """

    def __init__(
        self,
        record_id,
        field: str,
        message: str,
        kind: str = "expense record",
    ) -> None:
        self.record_id = record_id
        self.field = field
        self.message = message
        super().__init__(
            f"Invalid {kind} id={record_id!r} field={field}: {message}"
        )


__all__ = ["ValidationError"]
