"""Vote state machine.

A user's vote on a single target is one of none / upvote / downvote.
Requesting a vote either casts it, switches to it, or (when it is already
the standing vote) withdraws it. The score delta of every transition is
fixed by the (current, requested) pair alone:

    current    requested   next       delta
    none       upvote      upvote     +1
    none       downvote    downvote   -1
    upvote     upvote      none       -1
    upvote     downvote    downvote   -2
    downvote   downvote    none       +1
    downvote   upvote      upvote     +2
"""

from agora.domain.value import VoteChoice, VoteType
from agora.domain.value.common import ValueObject

_WEIGHT = {
    VoteChoice.NONE: 0,
    VoteChoice.UPVOTE: 1,
    VoteChoice.DOWNVOTE: -1,
}


class VoteTransition(ValueObject):
    """Outcome of requesting a vote from a given standing vote."""

    previous: VoteChoice
    requested: VoteType
    next: VoteChoice
    delta: int

    @property
    def upvote_delta(self) -> int:
        """Change to the target's upvote tally."""
        return int(self.next is VoteChoice.UPVOTE) - int(
            self.previous is VoteChoice.UPVOTE
        )

    @property
    def downvote_delta(self) -> int:
        """Change to the target's downvote tally."""
        return int(self.next is VoteChoice.DOWNVOTE) - int(
            self.previous is VoteChoice.DOWNVOTE
        )


class VoteState(ValueObject):
    """Client-held vote state for one post or comment."""

    current_vote: VoteChoice = VoteChoice.NONE
    count: int = 0
    pending: bool = False


def transition(current: VoteChoice, requested: VoteType) -> VoteTransition:
    """Compute the next standing vote and the score delta.

    Args:
        current: The user's standing vote
        requested: The vote the user just asked for

    Returns:
        The transition, never fails
    """
    requested_choice = VoteChoice(requested.value)
    next_vote = VoteChoice.NONE if current is requested_choice else requested_choice
    return VoteTransition(
        previous=current,
        requested=requested,
        next=next_vote,
        delta=_WEIGHT[next_vote] - _WEIGHT[current],
    )


def apply_vote(state: VoteState, requested: VoteType) -> VoteState:
    """Apply a requested vote to a state.

    The returned state is marked pending; clearing it is the caller's job
    once the change has been acknowledged (see OptimisticVote).
    """
    step = transition(state.current_vote, requested)
    return VoteState(
        current_vote=step.next,
        count=state.count + step.delta,
        pending=True,
    )
