"""Comment Routes — threaded comments under reviews and inquiries.

Invariants:
    - The parent review/inquiry must be live
    - The author column matching the caller's role is set to the caller on create
      and is the owner column for update/delete
    - A comment is only reachable under its own parent
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from shopping_mall.api.dependencies import admin_actor, member_actor, seller_actor
from shopping_mall.core.domain_types import Actor, ActorType
from shopping_mall.models.community import Comment, Inquiry, Review
from shopping_mall.schemas.common import Page
from shopping_mall.schemas.community import (
    CommentCreate, CommentResponse, CommentSearch, CommentUpdate,
)
from shopping_mall.services.lifecycle import Lifecycle, ensure_owner, get_lifecycle
from shopping_mall.services.listing import Listing, equals, search_any, search_page

COMMENTS = Listing(Comment, frozenset({"created_at", "updated_at", "status"}))

AUTHOR_COLUMNS = {
    ActorType.MEMBER: "member_user_id",
    ActorType.SELLER: "seller_user_id",
    ActorType.ADMIN: "admin_user_id",
}


def build_router(
    role: ActorType, require_actor, parent: type, parent_segment: str, target: str,
) -> APIRouter:
    """Comment CRUD for one (role, parent kind) pair.

    target is the Comment column pointing at the parent (review_id / inquiry_id).
    """
    router = APIRouter(
        prefix=f"/shoppingMall/{role.route_segment}/{parent_segment}/{{parent_id}}/comments",
        tags=["comments"],
    )
    author = AUTHOR_COLUMNS[role]
    target_column = getattr(Comment, target)

    async def _comment(lc: Lifecycle, parent_id: UUID, comment_id: UUID) -> Comment:
        await lc.get_live(parent, parent_id)
        return await lc.get_live(Comment, comment_id, target_column == parent_id)

    async def _authored(lc: Lifecycle, parent_id: UUID, comment_id: UUID, actor: Actor):
        comment = await _comment(lc, parent_id, comment_id)
        ensure_owner(getattr(comment, author), actor, "comment")
        return comment

    @router.patch("", response_model=Page[CommentResponse])
    async def search_comments(
        parent_id: UUID,
        body: CommentSearch,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        await lc.get_live(parent, parent_id)
        return await search_page(
            lc.db, COMMENTS, body,
            equals(target_column, parent_id),
            search_any((Comment.body,), body.search),
            equals(Comment.status, body.status),
            equals(Comment.is_private, body.is_private),
            dto=CommentResponse,
        )

    @router.get("/{comment_id}", response_model=CommentResponse)
    async def get_comment(
        parent_id: UUID,
        comment_id: UUID,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        return await _comment(lc, parent_id, comment_id)

    @router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
    async def create_comment(
        parent_id: UUID,
        body: CommentCreate,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        await lc.get_live(parent, parent_id)
        return await lc.create(
            Comment, **{target: parent_id, author: actor.id}, **body.model_dump(),
        )

    @router.put("/{comment_id}", response_model=CommentResponse)
    async def update_comment(
        parent_id: UUID,
        comment_id: UUID,
        body: CommentUpdate,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        comment = await _authored(lc, parent_id, comment_id, actor)
        return await lc.update(comment, body.model_dump(exclude_unset=True))

    @router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_comment(
        parent_id: UUID,
        comment_id: UUID,
        actor: Actor = Depends(require_actor),
        lc: Lifecycle = Depends(get_lifecycle),
    ):
        await lc.remove(await _authored(lc, parent_id, comment_id, actor))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router


routers = [
    build_router(ActorType.MEMBER, member_actor, Review, "reviews", "review_id"),
    build_router(ActorType.SELLER, seller_actor, Review, "reviews", "review_id"),
    build_router(ActorType.ADMIN, admin_actor, Review, "reviews", "review_id"),
    build_router(ActorType.MEMBER, member_actor, Inquiry, "inquiries", "inquiry_id"),
    build_router(ActorType.SELLER, seller_actor, Inquiry, "inquiries", "inquiry_id"),
    build_router(ActorType.ADMIN, admin_actor, Inquiry, "inquiries", "inquiry_id"),
]
