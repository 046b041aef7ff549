"""End-to-end tests for subreddit and post endpoints."""

from uuid import uuid4

DEMO_SUBREDDIT_ID = "00000000-0000-4000-8000-000000000001"


class TestSubredditEndpoints:
    """End-to-end tests for /api/subreddits."""

    def test_create_and_fetch(self, client):
        """A created community should be retrievable by id."""
        # Act
        created = client.post(
            "/api/subreddits/create",
            json={"name": "gardening", "description": "Plants", "creatorId": "alice"},
        )

        # Assert
        assert created.status_code == 201
        subreddit = created.json()["subreddit"]
        assert subreddit["name"] == "gardening"
        assert subreddit["creatorId"] == "alice"
        assert subreddit["subscriberCount"] == 1

        fetched = client.get(f"/api/subreddits/{subreddit['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["subreddit"]["id"] == subreddit["id"]

    def test_reserved_name_is_issue_on_name(self, client):
        """Reserved names should fail with an issue on name."""
        # Act
        response = client.post(
            "/api/subreddits/create", json={"name": "Admin", "description": "x"}
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["details"] == [
            {"path": ["name"], "message": "This name is reserved and cannot be used"}
        ]

    def test_check_name(self, client):
        """Check-name should report availability and the reason when taken."""
        # Arrange
        client.post(
            "/api/subreddits/create", json={"name": "cycling", "description": "Bikes"}
        )

        # Act
        free = client.get("/api/subreddits/check-name", params={"name": "running"})
        taken = client.get("/api/subreddits/check-name", params={"name": "Cycling"})

        # Assert
        assert free.json() == {"available": True}
        assert taken.json() == {
            "available": False,
            "error": "This community name is already taken",
        }

    def test_check_name_requires_name(self, client):
        """Check-name without a name should be a 400."""
        # Act
        response = client.get("/api/subreddits/check-name")

        # Assert
        assert response.status_code == 400
        assert response.json() == {"error": "Name parameter is required"}

    def test_unknown_subreddit_is_404(self, client):
        """Unknown and malformed ids should both be not found."""
        # Act
        unknown = client.get(f"/api/subreddits/{uuid4()}")
        malformed = client.get("/api/subreddits/test-id")

        # Assert
        assert unknown.status_code == 404
        assert unknown.json() == {"error": "Subreddit not found"}
        assert malformed.status_code == 404

    def test_subscribe_and_unsubscribe(self, seeded_client):
        """Subscribing should bump the count and unsubscribing drop it."""
        # Act
        subscribed = seeded_client.post(
            "/api/subreddits/subscribe",
            json={"subredditId": DEMO_SUBREDDIT_ID, "userId": "bob"},
        )
        after_subscribe = seeded_client.get(f"/api/subreddits/{DEMO_SUBREDDIT_ID}")
        seeded_client.post(
            "/api/subreddits/unsubscribe",
            json={"subredditId": DEMO_SUBREDDIT_ID, "userId": "bob"},
        )
        after_unsubscribe = seeded_client.get(f"/api/subreddits/{DEMO_SUBREDDIT_ID}")

        # Assert
        assert subscribed.status_code == 200
        assert subscribed.json() == {
            "success": True,
            "subredditId": DEMO_SUBREDDIT_ID,
            "userId": "bob",
        }
        assert after_subscribe.json()["subreddit"]["subscriberCount"] == 2
        assert after_unsubscribe.json()["subreddit"]["subscriberCount"] == 1

    def test_subscribe_requires_user(self, client):
        """An empty user id should be rejected."""
        # Act
        response = client.post(
            "/api/subreddits/subscribe", json={"subredditId": "x", "userId": ""}
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["details"][0]["path"] == ["userId"]


class TestPostEndpoints:
    """End-to-end tests for /api/posts."""

    def test_create_post(self, client):
        """A valid post should be created with zeroed tallies."""
        # Arrange
        subreddit_id = str(uuid4())

        # Act
        response = client.post(
            "/api/posts/create",
            json={"title": "Hello", "content": "World", "subredditId": subreddit_id},
        )

        # Assert
        assert response.status_code == 201
        post = response.json()["post"]
        assert post["subredditId"] == subreddit_id
        assert post["authorId"] == "anonymous"
        assert post["score"] == 0
        assert post["commentCount"] == 0

    def test_create_post_reports_all_issues(self, client):
        """Every invalid field should be reported together."""
        # Act
        response = client.post(
            "/api/posts/create", json={"title": "", "content": "", "subredditId": 5}
        )

        # Assert
        assert response.status_code == 400
        assert len(response.json()["details"]) >= 3

    def test_list_posts_paginates(self, client):
        """Listing should page newest first and be cacheable."""
        # Arrange
        subreddit_id = str(uuid4())
        for i in range(3):
            client.post(
                "/api/posts/create",
                json={"title": f"Post {i}", "content": "Body", "subredditId": subreddit_id},
            )

        # Act
        response = client.get("/api/posts", params={"page": 1, "pageSize": 2})

        # Assert
        assert response.status_code == 200
        assert response.headers["cache-control"] == "public, max-age=60"
        data = response.json()
        assert data["page"] == 1
        assert data["pageSize"] == 2
        assert data["total"] == 3
        assert data["totalPages"] == 2
        assert [p["title"] for p in data["posts"]] == ["Post 2", "Post 1"]

    def test_list_posts_filters_by_subreddit(self, client):
        """The subredditId parameter should filter the listing."""
        # Arrange
        wanted = str(uuid4())
        client.post(
            "/api/posts/create",
            json={"title": "Mine", "content": "Body", "subredditId": wanted},
        )
        client.post(
            "/api/posts/create",
            json={"title": "Other", "content": "Body", "subredditId": str(uuid4())},
        )

        # Act
        response = client.get("/api/posts", params={"subredditId": wanted})

        # Assert
        assert [p["title"] for p in response.json()["posts"]] == ["Mine"]

    def test_list_posts_rejects_bad_page_size(self, client):
        """Out of range query parameters should use the 400 envelope."""
        # Act
        response = client.get("/api/posts", params={"pageSize": 0})

        # Assert
        assert response.status_code == 400
        assert response.json()["details"][0]["path"] == ["pageSize"]
