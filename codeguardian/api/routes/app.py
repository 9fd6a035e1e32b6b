from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def welcome():
    return {"message": "The CodeGuardian AI API is live!"}
