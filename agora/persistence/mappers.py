"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from agora.domain.model import (
    Comment,
    ModerationAction,
    Notification,
    Post,
    Subreddit,
    User,
    Vote,
)
from agora.domain.value import (
    CommentId,
    ModerationActionId,
    ModerationKind,
    NotificationId,
    NotificationType,
    PostId,
    SubredditId,
    UserId,
    VoteId,
    VoteTarget,
    VoteType,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        email=row.get("email"),
        karma=row["karma"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_subreddit(row: Dict[str, Any]) -> Subreddit:
    """Convert database row to Subreddit domain model."""
    return Subreddit(
        id=SubredditId(row["id"]),
        name=row["name"],
        description=row["description"],
        creator_id=UserId(row["creator_id"]),
        subscriber_count=row["subscriber_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def subreddit_to_dict(subreddit: Subreddit) -> Dict[str, Any]:
    """Convert Subreddit domain model to database dict."""
    return subreddit.model_dump()


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model."""
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        content=row["content"],
        author_id=UserId(row["author_id"]),
        subreddit_id=SubredditId(row["subreddit_id"]),
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        comment_count=row["comment_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    return post.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent = row.get("parent_comment_id")
    return Comment(
        id=CommentId(row["id"]),
        content=row["content"],
        author_id=UserId(row["author_id"]),
        post_id=PostId(row["post_id"]),
        parent_comment_id=CommentId(parent) if parent else None,
        upvotes=row["upvotes"],
        downvotes=row["downvotes"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(row["id"]),
        user_id=UserId(row["user_id"]),
        target_type=VoteTarget(row["target_type"]),
        target_id=row["target_id"],
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Enum values are stored as plain strings.
    """
    data = vote.model_dump()
    data["target_type"] = vote.target_type.value
    data["vote_type"] = vote.vote_type.value
    return data


def row_to_moderation_action(row: Dict[str, Any]) -> ModerationAction:
    """Convert database row to ModerationAction domain model."""
    target_type = row.get("target_type")
    return ModerationAction(
        id=ModerationActionId(row["id"]),
        kind=ModerationKind(row["kind"]),
        actor_id=UserId(row["actor_id"]),
        target_id=row["target_id"],
        target_type=VoteTarget(target_type) if target_type else None,
        reason=row.get("reason"),
        expires_at=row.get("expires_at"),
        is_permanent=row["is_permanent"],
        created_at=row["created_at"],
    )


def moderation_action_to_dict(action: ModerationAction) -> Dict[str, Any]:
    """Convert ModerationAction domain model to database dict."""
    data = action.model_dump()
    data["kind"] = action.kind.value
    data["target_type"] = action.target_type.value if action.target_type else None
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model."""
    return Notification(
        id=NotificationId(row["id"]),
        user_id=UserId(row["user_id"]),
        type=NotificationType(row["type"]),
        message=row["message"],
        read=row["read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
