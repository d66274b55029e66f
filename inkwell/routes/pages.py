"""
Custom Page Routes.

Summary
-------
Endpoints include:
  - Read a published page by slug (cached)
  - Preview any page by id, drafts included
  - List pages for management
  - Load a page into the editor
  - Create or edit a page
  - Delete a page

Literal segments of this router (``manage``, ``preview``, ``edit``, ...) and
the names ``index`` and ``create`` are reserved and cannot be used as page slugs.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path
from fastapi.responses import ORJSONResponse

from inkwell.dependencies import PAGE_ROUTE_PREFIX, PageServiceDep
from inkwell.schemas.base import SLUG_PATTERN
from inkwell.schemas.page import (
    PageDeleteRequest,
    PageEditModel,
    PageSaveResponse,
    PageSegment,
    PageView,
)

router = APIRouter(prefix=PAGE_ROUTE_PREFIX, tags=["📄 Pages"])

_NOT_FOUND = {
    "description": "Not found",
    "content": {"application/json": {"example": {"detail": "Page 'about' not found"}}},
}


@router.get(
    "/preview/{page_id}",
    response_class=ORJSONResponse,
    response_model=PageView,
    summary="Preview a page",
    description="Render a page by id without the cache; drafts are allowed.",
    responses={404: _NOT_FOUND},
    operation_id="pages_preview",
)
async def preview_page(page_id: UUID, service: PageServiceDep) -> PageView:
    return await service.preview(page_id)


@router.get(
    "/manage",
    response_class=ORJSONResponse,
    response_model=list[PageSegment],
    summary="List pages",
    operation_id="pages_manage",
)
async def manage_pages(service: PageServiceDep) -> list[PageSegment]:
    return await service.list_segments()


@router.get(
    "/manage/edit/{page_id}",
    response_class=ORJSONResponse,
    response_model=PageEditModel,
    summary="Load a page into the editor",
    responses={404: _NOT_FOUND},
    operation_id="pages_edit",
)
async def edit_page(page_id: UUID, service: PageServiceDep) -> PageEditModel:
    return await service.get_edit_model(page_id)


@router.post(
    "/manage/createoredit",
    response_class=ORJSONResponse,
    response_model=PageSaveResponse,
    summary="Create or edit a page",
    description="Creates a page when no id is given, otherwise updates it.",
    responses={
        200: {"content": {"application/json": {"example": {"pageId": "0b0f0f5e-6f1c-4c55-a5e4-1b5c8f0f7b39"}}}},
        400: {
            "description": "Reserved slug",
            "content": {"application/json": {"example": {"detail": "Reserved Slug: 'manage'", "slug": "manage"}}},
        },
        404: _NOT_FOUND,
        409: {
            "description": "Slug taken",
            "content": {"application/json": {"example": {"detail": "Page with slug 'about' already exists"}}},
        },
    },
    operation_id="pages_create_or_edit",
)
async def create_or_edit_page(page: PageEditModel, service: PageServiceDep) -> PageSaveResponse:
    """
    Save a page and drop its cached copy.

    Parameters
    ----------
    page : PageEditModel
        Editor payload; ``id`` is omitted for new pages.
    service : PageService
        Page service dependency.

    Returns
    -------
    PageSaveResponse
        Id of the saved page.
    """
    page_id = await service.create_or_edit(page)
    return PageSaveResponse(page_id=page_id)


@router.post(
    "/manage/delete",
    response_class=ORJSONResponse,
    response_model=UUID,
    summary="Delete a page",
    responses={404: _NOT_FOUND},
    operation_id="pages_delete",
)
async def delete_page(request: PageDeleteRequest, service: PageServiceDep) -> UUID:
    return await service.delete(request.page_id, request.slug)


@router.get(
    "/{slug}",
    response_class=ORJSONResponse,
    response_model=PageView,
    summary="Read a page",
    description="Published page by slug, served from the content cache.",
    responses={404: _NOT_FOUND},
    operation_id="pages_get_by_slug",
)
async def get_page(
    slug: Annotated[str, Path(pattern=SLUG_PATTERN, max_length=128)],
    service: PageServiceDep,
) -> PageView:
    return await service.get_published(slug)
