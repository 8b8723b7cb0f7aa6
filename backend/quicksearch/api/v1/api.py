from fastapi import APIRouter
from .search import router as search_router
from .items import router as items_router
from .views import router as views_router

router = APIRouter()

router.include_router(search_router, prefix="/search", tags=["search"])
router.include_router(items_router, tags=["items"])
router.include_router(views_router, tags=["views"])
