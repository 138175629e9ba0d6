"""Notion API adapter."""

from chatly.adapter.notion.client import NotionAPIError, NotionClient

__all__ = ["NotionAPIError", "NotionClient"]
