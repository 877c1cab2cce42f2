"""Post operations, scoped to the owning user."""

import logging
import math

from sqlalchemy.orm import Session

from blog_api.database import storage_guard
from blog_api.exceptions import NotFound
from blog_api.models.post import Post
from blog_api.models.user import User
from blog_api.repositories import posts as repo
from blog_api.schemas.post import PostCreate, PostPage, PostResponse, PostUpdate

logger = logging.getLogger(__name__)


def _get_owned_post(db: Session, owner: User, post_id: int) -> Post:
    """Get a post owned by the user.

    Posts of other users are reported as missing so their existence is not
    revealed.
    """
    post = repo.find_owned_post(db, post_id, owner.id)
    if post is None:
        logger.info(f"Post {post_id} not found for user {owner.id}")
        raise NotFound("Post not found")
    return post


def create_post(db: Session, owner: User, data: PostCreate) -> Post:
    """Create a post owned by the caller."""
    with storage_guard(db, "creating a post"):
        post = repo.insert_post(db, owner.id, data.title, data.body)
    logger.info(f"User {owner.id} created post {post.id}")
    return post


def get_post(db: Session, owner: User, post_id: int) -> Post:
    with storage_guard(db, "fetching a post"):
        return _get_owned_post(db, owner, post_id)


def update_post(db: Session, owner: User, post_id: int, data: PostUpdate) -> Post:
    """Apply the fields the client sent; the rest stay unchanged."""
    with storage_guard(db, "updating a post"):
        post = _get_owned_post(db, owner, post_id)
        changes = data.model_dump(exclude_unset=True)
        if not changes:
            return post
        return repo.update_post(db, post, changes)


def delete_post(db: Session, owner: User, post_id: int) -> None:
    with storage_guard(db, "deleting a post"):
        post = _get_owned_post(db, owner, post_id)
        repo.delete_post(db, post)
    logger.info(f"User {owner.id} deleted post {post_id}")


def list_posts(db: Session, owner: User, page: int, per_page: int) -> PostPage:
    """Return one page of the caller's posts, oldest first."""
    with storage_guard(db, "listing posts"):
        total = repo.count_posts_by_owner(db, owner.id)
        posts = repo.list_posts_by_owner(db, owner.id, (page - 1) * per_page, per_page)

    return PostPage(
        data=[PostResponse.model_validate(post) for post in posts],
        current_page=page,
        per_page=per_page,
        total=total,
        last_page=max(1, math.ceil(total / per_page)),
    )
