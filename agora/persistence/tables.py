"""SQLAlchemy table definitions for Agora.

Pydantic domain models are mapped to and from these tables by hand (see
mappers.py). scripts/create_schema.py creates them from this metadata.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(255), primary_key=True),  # Opaque id from identity provider
    Column("username", String(20), nullable=False),
    Column("email", String(255), nullable=True),
    Column("karma", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_username", users_table.c.username)

# ============================================================================
# SUBREDDITS TABLE
# ============================================================================
subreddits_table = Table(
    "subreddits",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(21), nullable=False),
    Column("description", String(500), nullable=False, server_default=""),
    Column("creator_id", String(255), nullable=False),
    Column("subscriber_count", Integer, nullable=False, server_default="1"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# Names are unique ignoring case
Index("idx_subreddits_name_lower", func.lower(subreddits_table.c.name), unique=True)

subscriptions_table = Table(
    "subscriptions",
    metadata,
    Column(
        "subreddit_id",
        UUID(as_uuid=True),
        ForeignKey("subreddits.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("subreddit_id", "user_id", name="unique_subscription"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(300), nullable=False),
    Column("content", Text, nullable=False),
    Column("author_id", String(255), nullable=False),
    Column("subreddit_id", UUID(as_uuid=True), nullable=False),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_posts_subreddit_created", posts_table.c.subreddit_id, posts_table.c.created_at)
Index("idx_posts_author_id", posts_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("content", Text, nullable=False),
    Column("author_id", String(255), nullable=False),
    Column("post_id", UUID(as_uuid=True), nullable=False),
    Column(
        "parent_comment_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_comments_post_parent", comments_table.c.post_id, comments_table.c.parent_comment_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# VOTES TABLE (Polymorphic: posts and comments)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("user_id", String(255), nullable=False),
    Column(
        "target_type",
        Enum("post", "comment", name="vote_target"),
        nullable=False,
    ),
    Column("target_id", UUID(as_uuid=True), nullable=False),
    Column(
        "vote_type",
        Enum("upvote", "downvote", name="vote_type"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "target_type", "target_id", name="unique_vote"),
)

Index("idx_votes_user_id", votes_table.c.user_id)
Index("idx_votes_target", votes_table.c.target_type, votes_table.c.target_id)

# ============================================================================
# MODERATION ACTIONS TABLE (Append-only)
# ============================================================================
moderation_actions_table = Table(
    "moderation_actions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "kind",
        Enum("flag", "ban", "mute", "remove_comment", name="moderation_kind"),
        nullable=False,
    ),
    Column("actor_id", String(255), nullable=False),
    Column("target_id", String(255), nullable=False),
    Column("target_type", String(20), nullable=True),
    Column("reason", String(500), nullable=True),
    Column("expires_at", TIMESTAMP(timezone=True), nullable=True),
    Column("is_permanent", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_moderation_kind_target",
    moderation_actions_table.c.kind,
    moderation_actions_table.c.target_id,
)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("user_id", String(255), nullable=False),
    Column(
        "type",
        Enum("mention", "reply", "mod", name="notification_type"),
        nullable=False,
    ),
    Column("message", Text, nullable=False),
    Column("read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_notifications_user_id", notifications_table.c.user_id)
