"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from agora.domain.model.comment import Comment
from agora.domain.model.post import Post
from agora.domain.value import CommentId, PostId, SubredditId, UserId
from agora.interface.api.app import create_app
from tests.di import make_test_settings


def make_post(**overrides) -> Post:
    """Build a post with sensible defaults for tests."""
    values = {
        "id": PostId(uuid4()),
        "title": "Test Post",
        "content": "Test content",
        "author_id": UserId("author"),
        "subreddit_id": SubredditId(uuid4()),
        "created_at": datetime.now(),
        "updated_at": datetime.now(),
    }
    values.update(overrides)
    return Post(**values)


def make_comment(post_id: PostId, **overrides) -> Comment:
    """Build a comment on the given post with sensible defaults for tests."""
    values = {
        "id": CommentId(uuid4()),
        "content": "Test comment",
        "author_id": UserId("author"),
        "post_id": post_id,
        "created_at": datetime.now(),
        "updated_at": datetime.now(),
    }
    values.update(overrides)
    return Comment(**values)


@pytest.fixture
def client():
    """Test client over an app with fresh in-memory repositories."""
    app_instance = create_app(make_test_settings())
    with TestClient(app_instance) as test_client:
        yield test_client


@pytest.fixture
def seeded_client():
    """Test client over an app with the demo user and subreddit loaded."""
    app_instance = create_app(make_test_settings(seed_demo_data=True))
    with TestClient(app_instance) as test_client:
        yield test_client
