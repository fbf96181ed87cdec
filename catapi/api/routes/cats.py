"""Cat Routes — GET /api/cats and GET /api/cat/{id}.

Invariants:
    - Routes never set status codes for failures; CatApiError handlers do
    - The {id} segment reaches CatHandlers.get_cat as a raw string
    - Handlers are built per request from the injected pool

Design Decisions:
    - get_cat_handlers is the override point for tests (app.dependency_overrides)
"""

from fastapi import APIRouter, Depends

from catapi.infrastructure.cat_repository import SqlCatRepository
from catapi.infrastructure.database import DatabasePool, get_db_pool
from catapi.schemas.cat import CatResponse, ErrorResponse
from catapi.services.cat_handlers import CatHandlers

router = APIRouter(prefix="/api", tags=["cats"])

_repository = SqlCatRepository()


def get_cat_handlers(pool: DatabasePool = Depends(get_db_pool)) -> CatHandlers:
    return CatHandlers(pool, _repository)


@router.get(
    "/cats",
    response_model=list[CatResponse],
    responses={500: {"model": ErrorResponse}},
)
async def list_cats(handlers: CatHandlers = Depends(get_cat_handlers)):
    """List up to 100 cats."""
    cats = await handlers.list_cats()
    return [CatResponse.model_validate(cat) for cat in cats]


@router.get(
    "/cat/{cat_id}",
    response_model=CatResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_cat(cat_id: str, handlers: CatHandlers = Depends(get_cat_handlers)):
    """Get one cat by id (1..150)."""
    cat = await handlers.get_cat(cat_id)
    return CatResponse.model_validate(cat)
