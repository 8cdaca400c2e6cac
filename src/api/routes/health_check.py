from fastapi import APIRouter

from src.domain.base import isoformat_utc, utcnow

router = APIRouter(tags=["Health"])


@router.get("/")
async def root():
    return {"message": "Welcome to Adaboards API"}


@router.get("/health")
async def health():
    return {"status": "ok", "timestamp": isoformat_utc(utcnow())}
