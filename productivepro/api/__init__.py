from fastapi import APIRouter

from productivepro.api.habits import router as habits_router
from productivepro.api.insights import router as insights_router

router = APIRouter()
router.include_router(habits_router)
router.include_router(insights_router)

__all__ = ["router"]
