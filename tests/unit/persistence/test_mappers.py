"""Unit tests for Notion page mappers."""

from datetime import datetime, timezone

from chatly.domain.value import VoteState
from chatly.persistence import mappers


def text_prop(value: str) -> dict:
    return {"rich_text": [{"plain_text": value}]}


POST_PAGE = {
    "id": "post-1",
    "created_time": "2024-05-01T12:30:00.000Z",
    "archived": False,
    "properties": {
        "Title": {"title": [{"plain_text": "Hello "}, {"plain_text": "world"}]},
        "Content": text_prop("Body"),
        "Author Name": text_prop("Alice"),
        "Author ID": text_prop("alice"),
        "Upvotes Count": {"number": 7},
    },
}


class TestReaders:
    """Tests for property readers."""

    def test_read_text_joins_segments(self):
        """Rich text and title segments are concatenated."""
        assert mappers.read_text(POST_PAGE, "Title") == "Hello world"
        assert mappers.read_text(POST_PAGE, "Content") == "Body"

    def test_read_text_formula_and_select(self):
        """Formula strings and select names read as text."""
        page = {
            "properties": {
                "F": {"formula": {"string": "computed"}},
                "S": {"select": {"name": "option"}},
            }
        }

        assert mappers.read_text(page, "F") == "computed"
        assert mappers.read_text(page, "S") == "option"

    def test_missing_properties_default(self):
        """Missing properties read as empty values."""
        page = {"id": "x", "properties": {"Upvotes Count": {"number": None}}}

        assert mappers.read_text(page, "Title") == ""
        assert mappers.read_number(page, "Upvotes Count") == 0
        assert mappers.read_number(page, "Nope") == 0
        assert mappers.read_relation(page, "Post") == []
        assert mappers.read_created_time(page) is None


class TestBuilders:
    """Tests for property value builders."""

    def test_builders(self):
        """Builders produce Notion property values."""
        assert mappers.rich_text("hi") == {
            "rich_text": [{"type": "text", "text": {"content": "hi"}}]
        }
        assert mappers.title("T") == {
            "title": [{"type": "text", "text": {"content": "T"}}]
        }
        assert mappers.number(3) == {"number": 3}
        assert mappers.relation("a", "b") == {"relation": [{"id": "a"}, {"id": "b"}]}


class TestPageConversion:
    """Tests for page to model conversion."""

    def test_page_to_post(self):
        """Post pages convert with counts and creation time."""
        post = mappers.page_to_post(POST_PAGE, comments_count=1)

        assert post.id == "post-1"
        assert post.title == "Hello world"
        assert post.author_name == "Alice"
        assert post.upvotes_count == 7
        assert post.comments_count == 1
        assert post.created_at == datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)

    def test_negative_counter_read_as_zero(self):
        """A counter edited below zero by hand is read as zero."""
        page = {**POST_PAGE, "properties": {"Upvotes Count": {"number": -2}}}

        assert mappers.page_to_post(page).upvotes_count == 0

    def test_page_to_comment_with_parent(self):
        """Comment pages keep their post and parent relations."""
        page = {
            "id": "c-2",
            "properties": {
                "Content": text_prop("Reply"),
                "Post": {"relation": [{"id": "post-1"}]},
                "Parent": {"relation": [{"id": "c-1"}]},
            },
        }

        comment = mappers.page_to_comment(page)

        assert comment.post_id == "post-1"
        assert comment.parent_id == "c-1"
        assert comment.content == "Reply"

    def test_page_to_vote_archived(self):
        """Archived vote pages map to archived votes."""
        page = {
            "id": "v-1",
            "archived": True,
            "properties": {
                "User ID": text_prop("alice"),
                "Post": {"relation": [{"id": "post-1"}]},
            },
        }

        vote = mappers.page_to_vote(page)

        assert vote.user_id == "alice"
        assert vote.state == VoteState.ARCHIVED
        assert not vote.is_active
