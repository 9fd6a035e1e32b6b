from fastapi import Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.exceptions import RequestValidationError

from codeguardian.exceptions import MalformedPayloadError, WebhookSignatureError
from codeguardian.utils.logger import logger


async def unprocessable_entity_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = []
    for error in exc.errors():
        field = ".".join(str(loc) for loc in error["loc"]) if error["loc"] else "general"
        errors.append({"field": field, "message": error["msg"]})

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "The received data is invalid. Please check the fields below for details.",
            "errors": errors,
        },
    )


async def webhook_signature_exception_handler(
    request: Request, exc: WebhookSignatureError
) -> PlainTextResponse:
    client = request.client.host if request.client else "unknown"
    logger.warning(f"Rejected webhook from {client}: {exc.message}")
    return PlainTextResponse(exc.message, status_code=status.HTTP_401_UNAUTHORIZED)


async def malformed_payload_exception_handler(
    request: Request, exc: MalformedPayloadError
) -> PlainTextResponse:
    logger.error(f"Malformed webhook payload: {exc}")
    return PlainTextResponse(
        "Malformed payload", status_code=status.HTTP_400_BAD_REQUEST
    )
