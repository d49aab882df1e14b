"""
Messages API Router - FastAPI endpoints for organization messages.

Guidelines:
- Receives handlers via Dependency Injection (Dishka)
- Thin layer: only handles HTTP concerns (request/response)
- Delegates business rules to Application layer handlers
- Handlers return Result variants; this module is the only place that
  turns them into status codes

Flow:
  HTTP Request → Router → Command/Query → Handler → Repository
                                           ↓
  HTTP Response ← Router ← Result variant ←
"""

from logging import getLogger
from typing import NoReturn, Optional
from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel, ConfigDict, Field

from message_api.application.commands.messages import (
    CreateMessageCommand,
    CreateMessageHandler,
    DeleteMessageCommand,
    DeleteMessageHandler,
    UpdateMessageCommand,
    UpdateMessageHandler,
)
from message_api.application.common.results import (
    Conflict,
    Created,
    Deleted,
    NotFound,
    Result,
    Updated,
    ValidationError,
)
from message_api.application.dto.message import MessageDTO
from message_api.application.queries.messages import (
    GetMessageHandler,
    GetMessageQuery,
    ListMessagesHandler,
    ListMessagesQuery,
)
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId
from message_api.observability.metrics import (
    MessageOperation,
    increment_message_operation,
)

logger = getLogger(__name__)


# ==================== REQUEST/RESPONSE MODELS ====================


class CreateMessageRequest(BaseModel):
    """Request body for creating a message."""

    title: Optional[str] = None
    content: Optional[str] = None


class UpdateMessageRequest(BaseModel):
    """Request body for updating a message. Accepts isActive or is_active."""

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    content: Optional[str] = None
    is_active: bool = Field(True, alias="isActive")


# ==================== RESULT MAPPING ====================


def _raise_for(result: Result, *handled: type[Result]) -> NoReturn:
    """
    Raise the HTTPException matching a failed Result.

    Only variants listed in ``handled`` get their own status code; anything
    else is unexpected for the endpoint and becomes a 500.
    """
    if isinstance(result, ValidationError) and ValidationError in handled:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.errors)
    if isinstance(result, NotFound) and NotFound in handled:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=result.message)
    if isinstance(result, Conflict) and Conflict in handled:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=result.message)

    logger.error(f"[messages] Unexpected result at HTTP boundary: {result!r}")
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Internal server error",
    )


# ==================== ROUTER ====================

router = APIRouter(
    prefix="/organizations/{organization_id}/messages", tags=["messages"]
)


# ==================== ENDPOINTS ====================


@router.get(
    "",
    response_model=list[MessageDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_messages(
    organization_id: UUID,
    handler: FromDishka[ListMessagesHandler],
):
    """List all messages of an organization."""
    result = await handler.execute(
        ListMessagesQuery(organization_id=OrganizationId(str(organization_id)))
    )
    increment_message_operation(MessageOperation.LIST, result.name)

    if isinstance(result, Created):
        return [MessageDTO.from_entity(message) for message in result.value]
    _raise_for(result, ValidationError)


@router.get(
    "/{message_id}",
    response_model=MessageDTO,
    status_code=status.HTTP_200_OK,
    name="get_message",
)
@inject
async def get_message(
    organization_id: UUID,
    message_id: UUID,
    handler: FromDishka[GetMessageHandler],
):
    """Get a single message (active or not)."""
    result = await handler.execute(
        GetMessageQuery(
            organization_id=OrganizationId(str(organization_id)),
            message_id=MessageId(str(message_id)),
        )
    )
    increment_message_operation(MessageOperation.GET, result.name)

    if isinstance(result, Created):
        return MessageDTO.from_entity(result.value)
    _raise_for(result, NotFound, ValidationError)


@router.post(
    "",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_message(
    organization_id: UUID,
    body: CreateMessageRequest,
    request: Request,
    response: Response,
    handler: FromDishka[CreateMessageHandler],
):
    """
    Create a message.

    Response: 201 with the stored message and a Location header pointing at
    GET /organizations/{organization_id}/messages/{id}.
    """
    result = await handler.execute(
        CreateMessageCommand(
            organization_id=OrganizationId(str(organization_id)),
            title=body.title,
            content=body.content,
        )
    )
    increment_message_operation(MessageOperation.CREATE, result.name)

    if isinstance(result, Created):
        created = result.value
        response.headers["Location"] = str(
            request.url_for(
                "get_message",
                organization_id=created.organization_id.value,
                message_id=created.id.value,
            )
        )
        return MessageDTO.from_entity(created)
    _raise_for(result, ValidationError, Conflict)


@router.put(
    "/{message_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
@inject
async def update_message(
    organization_id: UUID,
    message_id: UUID,
    body: UpdateMessageRequest,
    handler: FromDishka[UpdateMessageHandler],
):
    """Replace title, content and active flag of an active message."""
    result = await handler.execute(
        UpdateMessageCommand(
            organization_id=OrganizationId(str(organization_id)),
            message_id=MessageId(str(message_id)),
            title=body.title,
            content=body.content,
            is_active=body.is_active,
        )
    )
    increment_message_operation(MessageOperation.UPDATE, result.name)

    if isinstance(result, Updated):
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    _raise_for(result, NotFound, ValidationError)


@router.delete(
    "/{message_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
@inject
async def delete_message(
    organization_id: UUID,
    message_id: UUID,
    handler: FromDishka[DeleteMessageHandler],
):
    """Delete an active message."""
    result = await handler.execute(
        DeleteMessageCommand(
            organization_id=OrganizationId(str(organization_id)),
            message_id=MessageId(str(message_id)),
        )
    )
    increment_message_operation(MessageOperation.DELETE, result.name)

    if isinstance(result, Deleted):
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    _raise_for(result, NotFound, ValidationError)
