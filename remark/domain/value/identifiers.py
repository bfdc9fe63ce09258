"""Strongly typed identifiers for Remark domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Core domain entity identifiers
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)
ReportId = NewType("ReportId", UUID)

# External references (owned by other systems)
ContentId = NewType("ContentId", UUID)
UserId = NewType("UserId", UUID)
