from fastapi import APIRouter

from .authors import router as authors_router
from .book_categories import router as book_categories_router
from .books import router as books_router
from .languages import router as languages_router
from .libraries import router as libraries_router

router = APIRouter()
router.include_router(authors_router)
router.include_router(libraries_router)
router.include_router(book_categories_router)
router.include_router(languages_router)
router.include_router(books_router)


@router.get(
    "/health",
    summary="API Health Check",
    description="Liveness check for monitoring; does not touch the database.",
    responses={
        200: {"description": "API is healthy and responding"},
    },
)
async def health_check():
    """Liveness check: answers while the process is serving requests."""
    return {"status": "healthy", "message": "Books Store API is running"}
