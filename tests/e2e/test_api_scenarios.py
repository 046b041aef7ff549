"""End-to-end tests for the core request/response contract."""

from uuid import uuid4


class TestVoteEndpoint:
    """End-to-end tests for POST /api/votes."""

    def test_cast_vote_echoes_vote(self, client):
        """A valid vote should come back with 201 and the vote fields."""
        # Arrange
        target_id = str(uuid4())

        # Act
        response = client.post(
            "/api/votes",
            json={"targetId": target_id, "targetType": "post", "voteType": "upvote"},
        )

        # Assert
        assert response.status_code == 201
        data = response.json()
        assert data["vote"]["targetId"] == target_id
        assert data["vote"]["targetType"] == "post"
        assert data["vote"]["voteType"] == "upvote"
        assert data["vote"]["userId"] == "anonymous"
        assert data["currentVote"] == "upvote"
        assert data["delta"] == 1

    def test_repeat_vote_withdraws(self, client):
        """Voting the same way twice should report the vote withdrawn."""
        # Arrange
        payload = {
            "targetId": str(uuid4()),
            "targetType": "comment",
            "voteType": "downvote",
            "userId": "alice",
        }
        client.post("/api/votes", json=payload)

        # Act
        response = client.post("/api/votes", json=payload)

        # Assert
        assert response.status_code == 201
        assert response.json()["currentVote"] == "none"
        assert response.json()["delta"] == 1

    def test_vote_updates_post_score(self, client):
        """Votes on a known post should show up in the listing."""
        # Arrange
        created = client.post(
            "/api/posts/create",
            json={"title": "Hi", "content": "There", "subredditId": str(uuid4())},
        ).json()["post"]

        # Act
        client.post(
            "/api/votes",
            json={"targetId": created["id"], "targetType": "post", "voteType": "upvote"},
        )

        # Assert
        posts = client.get("/api/posts").json()["posts"]
        assert posts[0]["upvotes"] == 1
        assert posts[0]["score"] == 1

    def test_invalid_vote_lists_every_issue(self, client):
        """A bad vote should be rejected with one issue per field."""
        # Act
        response = client.post(
            "/api/votes",
            json={"targetId": "nope", "targetType": "user", "voteType": "sideways"},
        )

        # Assert
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Invalid input"
        paths = [issue["path"] for issue in data["details"]]
        assert ["targetId"] in paths
        assert ["targetType"] in paths
        assert ["voteType"] in paths

    def test_non_object_body_is_rejected(self, client):
        """A JSON array body should be a 400 with a root issue."""
        # Act
        response = client.post("/api/votes", json=[1, 2, 3])

        # Assert
        assert response.status_code == 400
        assert response.json()["details"] == [
            {"path": [], "message": "Expected object, received list"}
        ]

    def test_malformed_json_is_rejected(self, client):
        """Unparseable bodies should use the same envelope."""
        # Act
        response = client.post(
            "/api/votes",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid input"


class TestSubredditValidation:
    """End-to-end tests for community creation validation."""

    def test_short_name_is_invalid_input(self, client):
        """A two letter name should be rejected with details."""
        # Act
        response = client.post(
            "/api/subreddits/create", json={"name": "ab", "description": "x"}
        )

        # Assert
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "Invalid input"
        assert len(data["details"]) > 0


class TestFlagEndpoint:
    """End-to-end tests for POST /api/moderation/flag."""

    def test_flag_comment(self, client):
        """Flagging should succeed and echo the submission."""
        # Act
        response = client.post(
            "/api/moderation/flag",
            json={
                "targetId": "id",
                "targetType": "comment",
                "userId": "user-1",
                "reason": "Spam",
            },
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["targetType"] == "comment"
        assert data["reason"] == "Spam"

    def test_short_reason_is_rejected(self, client):
        """Reasons under three characters should be rejected."""
        # Act
        response = client.post(
            "/api/moderation/flag",
            json={"targetId": "id", "targetType": "post", "userId": "u", "reason": "no"},
        )

        # Assert
        assert response.status_code == 400
        assert response.json()["details"][0]["path"] == ["reason"]


class TestUserEndpoints:
    """End-to-end tests for user lookups."""

    def test_unknown_user_is_404(self, client):
        """An unknown user id should be reported as not found."""
        # Act
        response = client.get("/api/users/nonexistent")

        # Assert
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    def test_demo_user_is_served(self, seeded_client):
        """The seeded demo user should be retrievable."""
        # Act
        response = seeded_client.get("/api/users/user-123")

        # Assert
        assert response.status_code == 200
        user = response.json()["user"]
        assert user["username"] == "testuser"
        assert user["karma"] == 42

    def test_activity_lists_votes(self, seeded_client):
        """A user's activity should include their votes."""
        # Arrange
        seeded_client.post(
            "/api/votes",
            json={
                "targetId": str(uuid4()),
                "targetType": "post",
                "voteType": "upvote",
                "userId": "user-123",
            },
        )

        # Act
        response = seeded_client.get("/api/users/user-123/activity")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["posts"] == []
        assert len(data["votes"]) == 1

    def test_activity_of_unknown_user_is_404(self, client):
        """Activity for an unknown user should be a 404."""
        # Act
        response = client.get("/api/users/ghost/activity")

        # Assert
        assert response.status_code == 404


class TestHealth:
    """End-to-end tests for the health check."""

    def test_health(self, client):
        """Health should report healthy with version details."""
        # Act
        response = client.get("/health")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"
        assert "gitSha" in data
