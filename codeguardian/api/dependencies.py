from fastapi import Request

from codeguardian.events.dispatcher import EventDispatcher
from codeguardian.utils.review_store import ReviewStore


def get_dispatcher(request: Request) -> EventDispatcher:
    return request.app.state.services.dispatcher


def get_review_store(request: Request) -> ReviewStore:
    return request.app.state.services.store
