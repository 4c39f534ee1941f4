"""Python client for the Todo API."""

from src.client.api import APIError, TodoAPIClient
from src.client.state import TodoStore

__all__ = ["APIError", "TodoAPIClient", "TodoStore"]
