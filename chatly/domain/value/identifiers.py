"""Strongly typed identifiers for Chatly domain entities.

Page ids in the document store and Firebase uids are opaque strings, so all
identifiers wrap ``str``.
"""

from typing import NewType

PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)
VoteId = NewType("VoteId", str)
UserId = NewType("UserId", str)
