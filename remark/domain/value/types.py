"""Domain value objects for Remark.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import Field

from remark.domain.value.common import ValueObject


class VoteType(str, Enum):
    """Type of vote a user can cast on a comment."""

    LIKE = "like"
    DISLIKE = "dislike"


class ReportReason(str, Enum):
    """Reasons a user can pick when reporting a comment.

    Stored as free text on the report so that moderators can also
    record reasons outside this list.
    """

    SPAM = "spam"
    HARASSMENT = "harassment"
    HATE_SPEECH = "hate_speech"
    MISINFORMATION = "misinformation"
    INAPPROPRIATE = "inappropriate"
    OTHER = "other"


class VoteStats(ValueObject):
    """Live like/dislike totals for a comment, counted from the vote ledger."""

    like_count: int = Field(default=0, ge=0)
    dislike_count: int = Field(default=0, ge=0)


class ToggleResult(ValueObject):
    """Outcome of a like/dislike toggle.

    When success is False the counts are zeroed and must not be shown
    as real totals.
    """

    success: bool
    message: str
    vote_type: VoteType | None = None  # Caller's vote after the toggle
    like_count: int = 0
    dislike_count: int = 0


class ReconcileResult(ValueObject):
    """Summary of a counter reconciliation run."""

    comments_checked: int = 0
    vote_counters_repaired: int = 0
    reply_counters_repaired: int = 0
