from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/healthcheck")
def health_check():
    return {"status": "hello"}
