from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from codeguardian.api.handlers.exception_handlers import (
    malformed_payload_exception_handler,
    unprocessable_entity_exception_handler,
    webhook_signature_exception_handler,
)
from codeguardian.api.routes import app as app_endpoints
from codeguardian.api.routes import reviews as review_endpoints
from codeguardian.api.routes import webhooks as webhook_endpoints
from codeguardian.core.services import Services
from codeguardian.exceptions import MalformedPayloadError, WebhookSignatureError
from codeguardian.utils.logger import logger, setup_logger

setup_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Builds the database, GitHub and model clients once in the main thread
    and exposes them on ``app.state.services``; background review runs only
    ever use these instances.
    """
    logger.info("Starting up...")
    app.state.services = Services.from_settings()

    yield

    logger.info("Shutting down...")
    app.state.services.close()


app = FastAPI(
    title="CodeGuardian AI",
    description="Automated pull request review",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_exception_handler(RequestValidationError, unprocessable_entity_exception_handler)
app.add_exception_handler(WebhookSignatureError, webhook_signature_exception_handler)
app.add_exception_handler(MalformedPayloadError, malformed_payload_exception_handler)

app.include_router(app_endpoints.router, tags=["general"])
app.include_router(webhook_endpoints.router, prefix="/webhooks", tags=["webhooks"])
app.include_router(review_endpoints.router, prefix="/api/reviews", tags=["reviews"])
