from pydantic import BaseModel, Field, field_validator


class CapturedOrderFields(BaseModel):
    """Partial order record recovered from a pasted message."""
    recipient_name: str | None = None
    recipient_phone: str | None = None
    recipient_address: str | None = None
    gps_url: str | None = None
    delivery_date: str | None = None  # YYYY-MM-DD
    delivery_time: str | None = None
    dedication: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value


class ParseResult(BaseModel):
    """Outcome of one quick-capture parse.

    When `aborted` is set the capture carried a delivery date in the past:
    `fields` is empty and the caller must not apply anything.
    """
    fields: CapturedOrderFields = Field(default_factory=CapturedOrderFields)
    missing_fields: set[str] = Field(default_factory=set)
    aborted: bool = False
    abort_reason: str | None = None

    @classmethod
    def stale(cls, reason: str) -> "ParseResult":
        return cls(aborted=True, abort_reason=reason)
