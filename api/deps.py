"""Dependency injection for API routes."""

from typing import Any, Dict

from fastapi import Request

from models.store import Store


def get_store(request: Request) -> Store:
    """Get the store opened by the application lifespan."""
    return request.app.state.store


async def get_body_fields(request: Request) -> Dict[str, Any]:
    """Read request body fields from a form or a JSON object."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}
    form = await request.form()
    return dict(form)
