from typing import Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Header, Request
from fastapi.responses import PlainTextResponse

from codeguardian.api.dependencies import get_dispatcher
from codeguardian.config import settings
from codeguardian.core.signature import verify_signature
from codeguardian.events.dispatcher import EventDispatcher
from codeguardian.events.task_runner import bg_tasks_cv
from codeguardian.integrations.github.github_webhook_parser import GitHubWebhookParser
from codeguardian.utils.logger import logger


router = APIRouter()
parser = GitHubWebhookParser()

EVENT_RECEIVED = "Event received. Processing will start shortly."
EVENT_IGNORED = "Event ignored"


async def raw_body(request: Request) -> bytes:
    """The request body exactly as received, before any decoding."""
    return await request.body()


async def verified_body(
    body: bytes = Depends(raw_body),
    signature: Optional[str] = Header(None, alias="X-Hub-Signature-256"),
) -> bytes:
    verify_signature(body, signature, settings.WEBHOOK_SECRET)
    return body


@router.post("/github", response_class=PlainTextResponse)
async def github_webhook(
    background_tasks: BackgroundTasks,
    body: bytes = Depends(verified_body),
    dispatcher: EventDispatcher = Depends(get_dispatcher),
):
    payload = parser.parse_envelope(body)

    if not payload.is_reviewable:
        logger.info(f"Ignoring pull request webhook with action '{payload.action}'.")
        return PlainTextResponse(EVENT_IGNORED)

    event = parser.to_event(payload)

    bg_tasks_cv.set(background_tasks)
    dispatcher.dispatch(event)

    return PlainTextResponse(EVENT_RECEIVED)
