"""Discussion board API endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from discussboard.core.modules.discussion.models import Entry, Reply
from discussboard.web.deps import AdminPasswordDep, AppDep
from discussboard.web.openapi import ErrorResponse

router: APIRouter = APIRouter(tags=["discussion"])


class PostMessageRequest(BaseModel):
    """Request to create an entry or a reply.

    Missing fields are treated as blank so they fail the same validation as empty strings.
    """

    name: str = Field("", description="Author display name")
    message: str = Field("", description="Message text")


class SuccessResponse(BaseModel):
    """Acknowledgement of a completed operation."""

    success: bool = Field(True, description="Always true")


@router.get(
    "/discussion",
    summary="List entries",
    description=(
        "Get all entries newest first, each with its replies oldest first. "
        "Returns an empty list if the board can't be read."
    ),
    operation_id="listEntries",
    responses={200: {"description": "All entries with replies"}},
)
async def list_entries(app: AppDep) -> list[Entry]:
    return await app.list_entries()


@router.post(
    "/discussion",
    summary="Create entry",
    description="Post a new top-level entry. Both name and message must be non-blank.",
    operation_id="createEntry",
    responses={
        200: {"description": "Entry created"},
        400: {"model": ErrorResponse, "description": "Blank or too long name or message"},
    },
)
async def create_entry(request: PostMessageRequest, app: AppDep) -> Entry:
    return await app.post_entry(request.name, request.message)


@router.post(
    "/discussion/{entry_id}/reply",
    summary="Create reply",
    description="Append a reply to an existing entry.",
    operation_id="createReply",
    responses={
        200: {"description": "Reply created"},
        400: {"model": ErrorResponse, "description": "Blank or too long name or message"},
        404: {"model": ErrorResponse, "description": "Entry not found"},
    },
)
async def create_reply(entry_id: str, request: PostMessageRequest, app: AppDep) -> Reply:
    return await app.post_reply(entry_id, request.name, request.message)


@router.delete(
    "/discussion/{entry_id}",
    summary="Delete entry",
    description="Delete an entry and all of its replies. Deleting an unknown entry succeeds without effect.",
    operation_id="deleteEntry",
    responses={
        200: {"description": "Entry deleted"},
        401: {"model": ErrorResponse, "description": "Missing or wrong admin password"},
    },
)
async def delete_entry(entry_id: str, app: AppDep, admin_password: AdminPasswordDep) -> SuccessResponse:
    await app.delete_entry(admin_password, entry_id)
    return SuccessResponse()


@router.delete(
    "/discussion/{entry_id}/reply/{reply_id}",
    summary="Delete reply",
    description="Delete a reply. Deleting an unknown reply, or a reply of an unknown entry, succeeds without effect.",
    operation_id="deleteReply",
    responses={
        200: {"description": "Reply deleted"},
        401: {"model": ErrorResponse, "description": "Missing or wrong admin password"},
    },
)
async def delete_reply(entry_id: str, reply_id: str, app: AppDep, admin_password: AdminPasswordDep) -> SuccessResponse:
    await app.delete_reply(admin_password, entry_id, reply_id)
    return SuccessResponse()
