from typing import TypedDict

from src.core.capture import ParseResult


class CaptureState(TypedDict, total=False):
    # --- Input ---
    raw_text: str
    today: str                           # YYYY-MM-DD

    # --- Split ---
    blocks: list[str | None]             # recipient, delivery, address, dedication

    # --- Date pre-pass ---
    delivery_date: str | None
    aborted: bool
    abort_reason: str | None

    # --- Block extraction ---
    fields: dict[str, str]               # CapturedOrderFields.model_dump() subset
    missing_fields: list[str]
    trajectory: list[str]                # node names visited

    # --- Final ---
    result: ParseResult | None
