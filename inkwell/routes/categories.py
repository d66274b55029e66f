from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import ORJSONResponse
from starlette.responses import Response
from starlette.status import HTTP_201_CREATED, HTTP_204_NO_CONTENT

from inkwell.dependencies import CategoryServiceDep
from inkwell.schemas.category import CategoryCreate, CategoryResponse

router = APIRouter(prefix="/categories", tags=["🗂️ Categories"])


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[CategoryResponse],
    summary="List categories",
    operation_id="categories_list",
)
async def list_categories(service: CategoryServiceDep) -> list[CategoryResponse]:
    return await service.list_all()


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=CategoryResponse,
    status_code=HTTP_201_CREATED,
    summary="Create a category",
    responses={
        409: {
            "description": "Route name taken",
            "content": {
                "application/json": {"example": {"detail": "Category with route name 'news' already exists"}},
            },
        },
    },
    operation_id="categories_create",
)
async def create_category(category: CategoryCreate, service: CategoryServiceDep) -> CategoryResponse:
    return await service.create(category)


@router.delete(
    "/{category_id}",
    status_code=HTTP_204_NO_CONTENT,
    summary="Delete a category",
    operation_id="categories_delete",
)
async def delete_category(category_id: UUID, service: CategoryServiceDep) -> Response:
    await service.delete(category_id)
    return Response(status_code=HTTP_204_NO_CONTENT)
