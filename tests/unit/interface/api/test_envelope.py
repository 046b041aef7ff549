"""Unit tests for the response envelope."""

import json

import pytest

from agora.application.usecase.subreddit import CheckNameResponse
from agora.domain.error import BusinessRuleViolationError, ForbiddenError, NotFoundError
from agora.interface.api.envelope import respond, respond_to_validation
from agora.interface.validation import Err, Ok, ValidationIssue


def body(response):
    return json.loads(response.body)


class TestRespond:
    """Tests for mapping action outcomes onto responses."""

    @pytest.mark.asyncio
    async def test_success_uses_camel_case_and_status(self):
        """A model result should be serialized by alias with the success status."""
        # Arrange
        async def action():
            return CheckNameResponse(available=False, error="taken")

        # Act
        response = await respond(action, status_code=201)

        # Assert
        assert response.status_code == 201
        assert body(response) == {"available": False, "error": "taken"}

    @pytest.mark.asyncio
    async def test_exclude_none_drops_empty_fields(self):
        """None-valued fields should be dropped when asked."""
        # Arrange
        async def action():
            return CheckNameResponse(available=True)

        # Act
        response = await respond(action, exclude_none=True)

        # Assert
        assert body(response) == {"available": True}

    @pytest.mark.asyncio
    async def test_not_found_maps_to_404(self):
        """NotFoundError should become a 404 naming the resource."""
        # Arrange
        async def action():
            raise NotFoundError("User", "ghost")

        # Act
        response = await respond(action)

        # Assert
        assert response.status_code == 404
        assert body(response) == {"error": "User not found"}

    @pytest.mark.asyncio
    async def test_rule_violation_maps_to_invalid_input(self):
        """A rule violation should be a 400 with one issue on its field."""
        # Arrange
        async def action():
            raise BusinessRuleViolationError("name", "This name is reserved")

        # Act
        response = await respond(action)

        # Assert
        assert response.status_code == 400
        assert body(response) == {
            "error": "Invalid input",
            "details": [{"path": ["name"], "message": "This name is reserved"}],
        }

    @pytest.mark.asyncio
    async def test_forbidden_maps_to_403(self):
        """ForbiddenError should become a bare 403."""
        # Arrange
        async def action():
            raise ForbiddenError("comment", "c-1", "bob")

        # Act
        response = await respond(action)

        # Assert
        assert response.status_code == 403
        assert body(response) == {"error": "Forbidden"}

    @pytest.mark.asyncio
    async def test_unexpected_error_maps_to_500(self):
        """Anything else should be a 500 carrying the message."""
        # Arrange
        async def action():
            raise RuntimeError("database exploded")

        # Act
        response = await respond(action)

        # Assert
        assert response.status_code == 500
        assert body(response) == {
            "error": "Internal server error",
            "details": "database exploded",
        }


class TestRespondToValidation:
    """Tests for respond_to_validation."""

    @pytest.mark.asyncio
    async def test_err_never_runs_action(self):
        """Invalid input should short-circuit with a 400."""
        # Arrange
        calls = []

        async def action(value):
            calls.append(value)

        result = Err(issues=(ValidationIssue(path=["name"], message="too short"),))

        # Act
        response = await respond_to_validation(result, action, status_code=201)

        # Assert
        assert calls == []
        assert response.status_code == 400
        assert body(response)["details"] == [{"path": ["name"], "message": "too short"}]

    @pytest.mark.asyncio
    async def test_ok_passes_value_to_action(self):
        """Valid input should reach the action and use the success status."""
        # Arrange
        async def action(value):
            return {"echo": value}

        # Act
        response = await respond_to_validation(Ok("hi"), action, status_code=201)

        # Assert
        assert response.status_code == 201
        assert body(response) == {"echo": "hi"}
