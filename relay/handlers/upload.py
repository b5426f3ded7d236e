"""HTTP upload fallback: persist one complete recording per request."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from fastapi import Request
from fastapi.responses import ORJSONResponse
from starlette.datastructures import UploadFile

from relay.config.storage import UPLOAD_FIELD_NAME

from .recordings import store_upload

logger = logging.getLogger(__name__)

UPLOAD_MISSING_ERROR = "No audio file provided"
UPLOAD_FAILED_ERROR = "Failed to store audio file"


async def handle_upload(request: Request, recordings_dir: Path) -> ORJSONResponse:
    form = await request.form()
    try:
        audio = form.get(UPLOAD_FIELD_NAME)
        if not isinstance(audio, UploadFile):
            return ORJSONResponse({"error": UPLOAD_MISSING_ERROR}, status_code=400)
        try:
            path = await asyncio.to_thread(store_upload, audio.file, recordings_dir)
        except OSError:
            logger.exception("upload: failed to store %s", audio.filename)
            return ORJSONResponse({"error": UPLOAD_FAILED_ERROR}, status_code=500)
    finally:
        await form.close()

    size = path.stat().st_size
    logger.info("upload: stored %s (%.2f KB)", path.name, size / 1024)
    return ORJSONResponse({"message": "File uploaded successfully", "filename": path.name})


__all__ = ["UPLOAD_FAILED_ERROR", "UPLOAD_MISSING_ERROR", "handle_upload"]
