import logging
from datetime import date
from typing import Literal

from fastapi import FastAPI, HTTPException, Response
from pydantic import BaseModel, ValidationError

from src.config import AppConfig
from src.builder import CaptureBuilder
from src.core.capture import ParseResult
from src.core.order import StaleDeliveryDateError, apply_capture, validate_order

logger = logging.getLogger("quick_capture.api")


class CaptureRequest(BaseModel):
    """Pasted order text plus an optional reference date and format."""
    text: str
    today: date | None = None
    format: Literal["numbered", "labeled"] | None = None


def _result_body(result: ParseResult) -> dict:
    body = result.model_dump(mode="json")
    body["missing_fields"] = sorted(result.missing_fields)
    return body


def create_app(config: AppConfig | None = None) -> FastAPI:
    """Factory function for creating the FastAPI app with config."""
    if config is None:
        config = AppConfig.from_yaml("config.yaml")

    logging.getLogger("quick_capture").setLevel(config.log_level.upper())

    builder = CaptureBuilder(config)
    parser = builder.build()
    drafts = builder.draft_store

    app = FastAPI(title="Quick Capture")

    def _load_draft(key: str) -> dict | None:
        try:
            return drafts.load(key)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

    @app.post("/capture")
    def capture(request: CaptureRequest):
        """Parse pasted text. Aborted captures are reported in the body, not as errors."""
        result = parser.parse(request.text, today=request.today, capture_format=request.format)
        return _result_body(result)

    @app.get("/drafts/{key}")
    def get_draft(key: str):
        draft = _load_draft(key)
        if draft is None:
            raise HTTPException(status_code=404, detail=f"Draft '{key}' not found")
        return draft

    @app.put("/drafts/{key}")
    def put_draft(key: str, form: dict):
        try:
            drafts.save(key, form)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        logger.info(f"Draft saved: key={key}")
        return {"status": "saved", "key": key}

    @app.delete("/drafts/{key}", status_code=204)
    def delete_draft(key: str):
        try:
            drafts.clear(key)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        logger.info(f"Draft cleared: key={key}")
        return Response(status_code=204)

    @app.post("/drafts/{key}/capture")
    def capture_into_draft(key: str, request: CaptureRequest):
        """Parse text and merge it into the draft. A stale date leaves the draft untouched."""
        form = _load_draft(key) or {}
        result = parser.parse(request.text, today=request.today, capture_format=request.format)
        try:
            merged = apply_capture(form, result)
        except StaleDeliveryDateError as e:
            logger.warning(f"Capture rejected for draft {key}: {e.reason}")
            raise HTTPException(status_code=409, detail=e.reason)
        drafts.save(key, merged)
        logger.info(f"Capture applied to draft {key}: needs_attention={merged['needs_attention']}")
        return merged

    @app.post("/drafts/{key}/order")
    def draft_to_order(key: str):
        draft = _load_draft(key)
        if draft is None:
            raise HTTPException(status_code=404, detail=f"Draft '{key}' not found")
        try:
            order = validate_order(draft)
        except ValidationError as e:
            raise HTTPException(
                status_code=422,
                detail=e.errors(include_url=False, include_context=False, include_input=False),
            )
        return order.model_dump(mode="json")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


# Module-level app instance for uvicorn (CMD: uvicorn src.api:app)
app = create_app()
