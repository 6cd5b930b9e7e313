"""FastAPI entry point for the transaction risk engine service."""

from __future__ import annotations

import logging
from typing import Dict

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from txrisk.api import api_router
from txrisk.utils.settings import get_settings


LOGGER = logging.getLogger(__name__)

logging.basicConfig(level=logging.INFO)

app = FastAPI(
	title="Transaction Risk Engine",
	version="1.0.0",
	description="Rule-based risk scoring and persona categorization for blockchain transactions.",
)

settings = get_settings()
LOGGER.info("Allowing CORS origins: %s", ", ".join(settings.cors_allow_origins))

app.add_middleware(
	CORSMiddleware,
	allow_origins=settings.cors_allow_origins,
	allow_credentials=False,
	allow_methods=["*"],
	allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/health")
def healthcheck() -> Dict[str, str]:
	"""Basic readiness probe."""
	return {"status": "ok"}
