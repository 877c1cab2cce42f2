"""Post data access."""

from sqlalchemy import func
from sqlalchemy.orm import Session

from blog_api.models.post import Post


def find_owned_post(db: Session, post_id: int, user_id: int) -> Post | None:
    return db.query(Post).filter(Post.id == post_id, Post.user_id == user_id).first()


def insert_post(db: Session, user_id: int, title: str, body: str) -> Post:
    post = Post(user_id=user_id, title=title, body=body)
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def update_post(db: Session, post: Post, changes: dict) -> Post:
    for field, value in changes.items():
        setattr(post, field, value)
    db.commit()
    db.refresh(post)
    return post


def delete_post(db: Session, post: Post) -> None:
    db.delete(post)
    db.commit()


def count_posts_by_owner(db: Session, user_id: int) -> int:
    return db.query(func.count(Post.id)).filter(Post.user_id == user_id).scalar() or 0


def list_posts_by_owner(db: Session, user_id: int, offset: int, limit: int) -> list[Post]:
    """Posts of one owner in ascending id order."""
    return (
        db.query(Post)
        .filter(Post.user_id == user_id)
        .order_by(Post.id)
        .offset(offset)
        .limit(limit)
        .all()
    )
