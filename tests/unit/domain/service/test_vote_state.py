"""Unit tests for the vote state machine."""

import pytest

from agora.domain.service import VoteState, apply_vote, transition
from agora.domain.value import VoteChoice, VoteType


class TestTransition:
    """Tests for the (current, requested) transition table."""

    @pytest.mark.parametrize(
        ("current", "requested", "expected_next", "expected_delta"),
        [
            (VoteChoice.NONE, VoteType.UPVOTE, VoteChoice.UPVOTE, 1),
            (VoteChoice.NONE, VoteType.DOWNVOTE, VoteChoice.DOWNVOTE, -1),
            (VoteChoice.UPVOTE, VoteType.UPVOTE, VoteChoice.NONE, -1),
            (VoteChoice.UPVOTE, VoteType.DOWNVOTE, VoteChoice.DOWNVOTE, -2),
            (VoteChoice.DOWNVOTE, VoteType.DOWNVOTE, VoteChoice.NONE, 1),
            (VoteChoice.DOWNVOTE, VoteType.UPVOTE, VoteChoice.UPVOTE, 2),
        ],
    )
    def test_transition_table(self, current, requested, expected_next, expected_delta):
        """Each pair should produce exactly one next vote and delta."""
        # Act
        step = transition(current, requested)

        # Assert
        assert step.previous == current
        assert step.next == expected_next
        assert step.delta == expected_delta

    def test_switch_moves_one_vote_between_tallies(self):
        """Switching from up to down should move one vote across tallies."""
        # Act
        step = transition(VoteChoice.UPVOTE, VoteType.DOWNVOTE)

        # Assert
        assert step.upvote_delta == -1
        assert step.downvote_delta == 1

    def test_withdraw_only_touches_own_tally(self):
        """Withdrawing a downvote should only change the downvote tally."""
        # Act
        step = transition(VoteChoice.DOWNVOTE, VoteType.DOWNVOTE)

        # Assert
        assert step.upvote_delta == 0
        assert step.downvote_delta == -1


class TestApplyVote:
    """Tests for apply_vote."""

    def test_apply_vote_adds_delta_and_marks_pending(self):
        """Applying a vote should shift the count and set pending."""
        # Arrange
        state = VoteState(current_vote=VoteChoice.NONE, count=10)

        # Act
        result = apply_vote(state, VoteType.UPVOTE)

        # Assert
        assert result.current_vote == VoteChoice.UPVOTE
        assert result.count == 11
        assert result.pending is True

    def test_apply_vote_does_not_mutate_input(self):
        """The original state should be left untouched."""
        # Arrange
        state = VoteState(current_vote=VoteChoice.UPVOTE, count=3)

        # Act
        apply_vote(state, VoteType.DOWNVOTE)

        # Assert
        assert state.current_vote == VoteChoice.UPVOTE
        assert state.count == 3
        assert state.pending is False

    @pytest.mark.parametrize("requested", [VoteType.UPVOTE, VoteType.DOWNVOTE])
    def test_double_toggle_returns_to_baseline(self, requested):
        """Voting the same way twice should restore the original vote and count."""
        # Arrange
        state = VoteState(current_vote=VoteChoice.NONE, count=-4)

        # Act
        result = apply_vote(apply_vote(state, requested), requested)

        # Assert
        assert result.current_vote == VoteChoice.NONE
        assert result.count == -4

    def test_count_may_go_negative(self):
        """Downvoting from zero should give a negative count."""
        # Act
        result = apply_vote(VoteState(), VoteType.DOWNVOTE)

        # Assert
        assert result.count == -1
