"""Domain value objects for Agora.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum


class VoteType(str, Enum):
    """Direction of a cast vote."""

    UPVOTE = "upvote"
    DOWNVOTE = "downvote"


class VoteChoice(str, Enum):
    """A user's standing vote on a target, including no vote at all."""

    NONE = "none"
    UPVOTE = "upvote"
    DOWNVOTE = "downvote"

    @classmethod
    def of(cls, vote_type: VoteType | None) -> "VoteChoice":
        """Lift a stored vote (or its absence) into a choice."""
        return cls.NONE if vote_type is None else cls(vote_type.value)

    def as_vote_type(self) -> VoteType | None:
        """Return the stored vote for this choice, None when there is none."""
        return None if self is VoteChoice.NONE else VoteType(self.value)


class VoteTarget(str, Enum):
    """Type of entity that can be voted on or flagged."""

    POST = "post"
    COMMENT = "comment"


class ModerationKind(str, Enum):
    """Kind of moderation action."""

    FLAG = "flag"
    BAN = "ban"
    MUTE = "mute"
    REMOVE_COMMENT = "remove_comment"


class NotificationType(str, Enum):
    """Kind of notification delivered to a user."""

    MENTION = "mention"
    REPLY = "reply"
    MOD = "mod"


class SearchScope(str, Enum):
    """Which content a search looks through."""

    POST = "post"
    COMMENT = "comment"
    ALL = "all"


class DateRange(str, Enum):
    """Recency window for search results."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
    ALL = "all"

    @property
    def days(self) -> int | None:
        """Length of the window in days, None for unbounded."""
        return {
            DateRange.DAY: 1,
            DateRange.WEEK: 7,
            DateRange.MONTH: 30,
            DateRange.YEAR: 365,
            DateRange.ALL: None,
        }[self]


class SearchSort(str, Enum):
    """Ordering of search results."""

    RELEVANCE = "relevance"
    DATE = "date"
    SCORE = "score"
