"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field

from newsroom.application.usecase.comment import (
    CommentItem,
    CommentThreadItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetArticleCommentsRequest,
    GetArticleCommentsUseCase,
    GetCommentThreadRequest,
    GetCommentThreadUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from newsroom.domain.error import (
    DataIntegrityError,
    NotAuthorizedError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from newsroom.domain.service import JWTService

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


def _authenticate(
    jwt_service: JWTService,
    authorization: str | None,
    auth_token: str | None,
    action: str,
) -> str:
    """Resolve the caller's user ID from a bearer header or auth cookie.

    Raises:
        HTTPException: 401 if no valid token naming a user ID was supplied
    """
    token = auth_token
    if authorization and authorization.lower().startswith("bearer "):
        token = authorization[len("bearer ") :].strip()

    user_id = jwt_service.get_user_id_from_token(token)
    if user_id:
        try:
            return str(UUID(user_id))
        except ValueError:
            logfire.warn("Token user ID is not a UUID", user_id=user_id)

    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=f"Authentication required to {action}",
    )


@router.get("/article/{article_id}", response_model=list[CommentItem])
async def get_article_comments(
    article_id: UUID,
    get_article_comments_use_case: FromDishka[GetArticleCommentsUseCase],
) -> list[CommentItem]:
    """Get the top-level comments of an article, newest first.

    Replies are not included; fetch a comment by ID to get its thread.

    Args:
        article_id: Article UUID
        get_article_comments_use_case: Use case from DI

    Returns:
        Top-level comments with author names
    """
    try:
        response = await get_article_comments_use_case.execute(
            GetArticleCommentsRequest(article_id=str(article_id))
        )
        return response.comments
    except StoreError as e:
        logfire.error("Listing article comments failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )


@router.get("/{comment_id}", response_model=CommentThreadItem)
async def get_comment_thread(
    comment_id: UUID,
    get_comment_thread_use_case: FromDishka[GetCommentThreadUseCase],
) -> CommentThreadItem:
    """Get a comment with all of its nested replies.

    Args:
        comment_id: Comment UUID
        get_comment_thread_use_case: Use case from DI

    Returns:
        Comment tree with ``replies`` nested at every level
    """
    try:
        return await get_comment_thread_use_case.execute(
            GetCommentThreadRequest(comment_id=str(comment_id))
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found",
        )
    except (DataIntegrityError, StoreError) as e:
        logfire.error("Expanding comment thread failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Accepts both snake_case and camelCase field names.
    """

    model_config = ConfigDict(populate_by_name=True)

    content: str
    article_id: UUID = Field(alias="articleId")
    parent_comment_id: UUID | None = Field(default=None, alias="parentCommentId")


@router.post(
    "",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Create a comment on an article or reply to another comment.

    Requires authentication.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated or the comment cannot be created
    """
    user_id = _authenticate(jwt_service, authorization, auth_token, "create comments")

    try:
        use_case_request = CreateCommentRequest(
            article_id=str(request.article_id),
            content=request.content,
            author_id=user_id,
            parent_id=str(request.parent_comment_id)
            if request.parent_comment_id
            else None,
        )
        return await create_comment_use_case.execute(use_case_request)
    except (NotFoundError, ValidationError, StoreError, ValueError) as e:
        logfire.warn("Comment creation failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str


@router.put("/{comment_id}", response_model=CommentItem)
async def update_comment(
    comment_id: UUID,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> CommentItem:
    """Update a comment's content.

    Only the comment author can edit.

    Args:
        comment_id: Comment UUID
        request: Update data (content)
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Updated comment details
    """
    user_id = _authenticate(jwt_service, authorization, auth_token, "edit comments")

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                comment_id=str(comment_id),
                user_id=user_id,
                content=request.content,
            )
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found",
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User not authorized",
        )
    except (ValidationError, StoreError, ValueError) as e:
        logfire.warn("Comment update failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and every reply beneath it.

    Only the comment author can delete.

    Args:
        comment_id: Comment UUID
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header
        auth_token: JWT token from cookie

    Returns:
        Confirmation message with the number of comments removed
    """
    user_id = _authenticate(jwt_service, authorization, auth_token, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=str(comment_id), user_id=user_id)
        )
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found",
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User not authorized",
        )
    except (StoreError, DataIntegrityError) as e:
        logfire.error("Comment delete failed", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
