from fastapi import APIRouter

from src.depends import backend_name

router = APIRouter(tags=["Health"])


@router.get("/health")
async def healthcheck():
    return {"status": "ok", "backend": backend_name()}
