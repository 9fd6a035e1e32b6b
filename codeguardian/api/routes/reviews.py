from fastapi import APIRouter, Depends

from codeguardian.api.dependencies import get_review_store
from codeguardian.api.responses import error_response, success_response
from codeguardian.api.security import get_api_key
from codeguardian.utils.review_store import ReviewStore

router = APIRouter()


@router.get("/{repository_id}", dependencies=[Depends(get_api_key)])
async def get_repository_reviews(
    repository_id: int, store: ReviewStore = Depends(get_review_store)
):
    repository = store.get_repository(repository_id)
    if repository is None:
        return error_response(
            "Repository not found", message="Repository not found", status_code=404
        )

    reviews = store.list_reviews(repository_id)
    return success_response(
        {
            "repository": repository.dict(),
            "reviews": [review.dict() for review in reviews],
        }
    )
