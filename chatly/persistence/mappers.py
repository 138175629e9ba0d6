"""Mappers between Notion page objects and domain models.

Notion returns each property as a typed object (``title``, ``rich_text``,
``number``, ``relation``...). Reading is forgiving: a missing or differently
typed property maps to an empty string or zero instead of failing, since
the databases are edited by hand in the Notion UI.
"""

from datetime import datetime
from typing import Any

from chatly.domain.model import Comment, Post, Vote
from chatly.domain.value import CommentId, PostId, UserId, VoteId, VoteState
from chatly.persistence import schema

Page = dict[str, Any]


def _join_plain_text(segments: Any) -> str:
    if not isinstance(segments, list):
        return ""
    return "".join(s.get("plain_text", "") for s in segments if isinstance(s, dict))


def read_text(page: Page, name: str) -> str:
    """Read a text-like property (rich_text, title, formula or select)."""
    prop = page.get("properties", {}).get(name)
    if not isinstance(prop, dict):
        return ""
    for key in ("rich_text", "title"):
        if key in prop:
            return _join_plain_text(prop[key])
    formula = prop.get("formula")
    if isinstance(formula, dict) and isinstance(formula.get("string"), str):
        return formula["string"]
    select = prop.get("select")
    if isinstance(select, dict):
        return select.get("name", "")
    return ""


def read_number(page: Page, name: str) -> int:
    """Read a number property, treating missing/null as 0."""
    prop = page.get("properties", {}).get(name)
    if not isinstance(prop, dict):
        return 0
    value = prop.get("number")
    return int(value) if isinstance(value, (int, float)) else 0


def read_relation(page: Page, name: str) -> list[str]:
    """Read the page ids of a relation property."""
    prop = page.get("properties", {}).get(name)
    if not isinstance(prop, dict):
        return []
    return [r["id"] for r in prop.get("relation", []) if isinstance(r, dict) and "id" in r]


def read_created_time(page: Page) -> datetime | None:
    """Parse the page's ``created_time`` (ISO 8601, UTC)."""
    value = page.get("created_time")
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def rich_text(content: str) -> dict[str, Any]:
    """Build a rich_text property value."""
    return {"rich_text": [{"type": "text", "text": {"content": content}}]}


def title(content: str) -> dict[str, Any]:
    """Build a title property value."""
    return {"title": [{"type": "text", "text": {"content": content}}]}


def number(value: int) -> dict[str, Any]:
    """Build a number property value."""
    return {"number": value}


def relation(*page_ids: str) -> dict[str, Any]:
    """Build a relation property value."""
    return {"relation": [{"id": page_id} for page_id in page_ids]}


def page_to_post(page: Page, comments_count: int = 0) -> Post:
    """Convert a Posts database page to a Post domain model.

    Args:
        page: Notion page object
        comments_count: Comment count computed separately

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(page["id"]),
        title=read_text(page, schema.TITLE),
        content=read_text(page, schema.CONTENT),
        author_name=read_text(page, schema.AUTHOR_NAME),
        author_id=read_text(page, schema.AUTHOR_ID),
        upvotes_count=max(0, read_number(page, schema.UPVOTES_COUNT)),
        comments_count=max(0, comments_count),
        created_at=read_created_time(page),
    )


def page_to_comment(page: Page) -> Comment:
    """Convert a Comments database page to a Comment domain model.

    Args:
        page: Notion page object

    Returns:
        Comment domain model
    """
    posts = read_relation(page, schema.POST)
    parents = read_relation(page, schema.PARENT)
    return Comment(
        id=CommentId(page["id"]),
        post_id=PostId(posts[0] if posts else ""),
        content=read_text(page, schema.CONTENT),
        author_name=read_text(page, schema.AUTHOR_NAME),
        author_id=read_text(page, schema.AUTHOR_ID),
        parent_id=CommentId(parents[0]) if parents else None,
        created_at=read_created_time(page),
    )


def page_to_vote(page: Page) -> Vote:
    """Convert an Upvotes database page to a Vote domain model.

    Args:
        page: Notion page object

    Returns:
        Vote domain model
    """
    posts = read_relation(page, schema.POST)
    return Vote(
        id=VoteId(page["id"]),
        post_id=PostId(posts[0] if posts else ""),
        user_id=UserId(read_text(page, schema.USER_ID)),
        state=VoteState.ARCHIVED if page.get("archived") else VoteState.ACTIVE,
        created_at=read_created_time(page),
    )
