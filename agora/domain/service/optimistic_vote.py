"""Optimistic voting with a pending-confirmation window.

OptimisticVote applies a vote immediately and reports it as pending until a
fixed confirmation window has elapsed. The window is a deferred callback on
a scheduler, by default the running asyncio event loop, so voting never
blocks.

Usage:
    vote = OptimisticVote(initial_vote=VoteChoice.NONE, initial_count=10)
    state = vote.vote(VoteType.UPVOTE)   # count 11, pending
    await asyncio.sleep(0.3)
    vote.state.pending                   # False

Every call starts its own timer; earlier timers are not cancelled, so the
first timer to fire clears the flag. discard() drops all outstanding
timers, which is what the owner does when it goes away.
"""

import asyncio
import itertools
from functools import partial
from typing import Callable, Protocol

import logfire

from agora.domain.service.vote_state import VoteState, apply_vote
from agora.domain.value import VoteChoice, VoteType
from agora.util.error import SchedulingError

DEFAULT_CONFIRMATION_WINDOW_MS = 300


class TimerHandle(Protocol):
    """Handle returned by a scheduler for a pending callback."""

    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything that can run a callback after a delay in seconds.

    asyncio event loops satisfy this protocol.
    """

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle: ...


class OptimisticVote:
    """Vote state for one target with optimistic updates."""

    def __init__(
        self,
        initial_vote: VoteChoice = VoteChoice.NONE,
        initial_count: int = 0,
        confirmation_window_ms: int = DEFAULT_CONFIRMATION_WINDOW_MS,
        scheduler: Scheduler | None = None,
    ) -> None:
        """Seed the state from the persisted vote and count.

        Args:
            initial_vote: The user's stored vote on the target
            initial_count: The target's stored score
            confirmation_window_ms: How long a change stays pending
            scheduler: Deferred-execution primitive, the running event loop
                when omitted
        """
        self._state = VoteState(current_vote=initial_vote, count=initial_count)
        self._window = confirmation_window_ms / 1000
        self._scheduler = scheduler
        self._timers: dict[int, TimerHandle] = {}
        self._tickets = itertools.count()

    @property
    def state(self) -> VoteState:
        return self._state

    def vote(self, requested: VoteType) -> VoteState:
        """Apply a vote now and schedule its confirmation.

        Args:
            requested: Upvote or downvote

        Returns:
            The new state, pending until the confirmation window elapses

        Raises:
            SchedulingError: If no scheduler was given and no event loop is running
        """
        scheduler = self._resolve_scheduler()
        self._state = apply_vote(self._state, requested)
        ticket = next(self._tickets)
        self._timers[ticket] = scheduler.call_later(
            self._window, partial(self._confirm, ticket)
        )
        logfire.debug(
            "Optimistic vote applied",
            vote=self._state.current_vote.value,
            count=self._state.count,
        )
        return self._state

    def discard(self) -> None:
        """Abandon any outstanding confirmation timers."""
        for timer in self._timers.values():
            timer.cancel()
        self._timers.clear()

    @property
    def outstanding(self) -> int:
        """Number of confirmation timers that have not fired yet."""
        return len(self._timers)

    def _confirm(self, ticket: int) -> None:
        self._timers.pop(ticket, None)
        self._state = self._state.model_copy(update={"pending": False})

    def _resolve_scheduler(self) -> Scheduler:
        if self._scheduler is not None:
            return self._scheduler
        try:
            return asyncio.get_running_loop()
        except RuntimeError as e:
            raise SchedulingError(
                "OptimisticVote needs a running event loop or an explicit scheduler"
            ) from e


class OptimisticVoteFactory:
    """Builds OptimisticVote instances with the configured confirmation window."""

    def __init__(
        self, confirmation_window_ms: int = DEFAULT_CONFIRMATION_WINDOW_MS
    ) -> None:
        self.confirmation_window_ms = confirmation_window_ms

    def create(
        self,
        initial_vote: VoteChoice = VoteChoice.NONE,
        initial_count: int = 0,
        scheduler: Scheduler | None = None,
    ) -> OptimisticVote:
        return OptimisticVote(
            initial_vote=initial_vote,
            initial_count=initial_count,
            confirmation_window_ms=self.confirmation_window_ms,
            scheduler=scheduler,
        )
