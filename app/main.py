from __future__ import annotations

import logging

from fastapi import FastAPI

from app.config import get_settings
from app.handlers import image_handler

logging.basicConfig(level=get_settings().log_level.upper())

app = FastAPI(title="ImageCrop API")

app.include_router(image_handler.router)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
