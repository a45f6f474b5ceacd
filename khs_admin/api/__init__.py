from fastapi import APIRouter

from khs_admin.interfaces.http.routers import giftcards, moderation, wallet


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(giftcards.router, prefix="/giftcards", tags=["gift cards"])
    router.include_router(wallet.router, prefix="/wallet", tags=["wallet"])
    router.include_router(moderation.router, prefix="/moderation", tags=["moderation"])
    return router


__all__ = [
    "create_api_router",
]
