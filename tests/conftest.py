"""Shared fixtures: a small normalized definition in the caller's dict shape."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def get_user_operation() -> dict[str, Any]:
    return {
        "description": "Returns a single user.",
        "parameters": [
            {"name": "id", "description": "User ID", "dataType": {"primitive": "integer"}},
        ],
        "responses": {
            "200": {"dataType": {"complex": "User"}},
            "404": {},
        },
    }


@pytest.fixture
def list_users_operation() -> dict[str, Any]:
    return {
        "description": "Lists users.",
        "description2": "Results are paged.",
        "parameters": [
            {"name": "page", "dataType": {"primitive": "integer"}},
            {"name": "role", "description": "Role filter", "dataType": {"enum": "Role"}},
        ],
        "responses": {
            "200": {"dataType": {"complex": "User", "isArray": True}},
        },
    }


@pytest.fixture
def delete_user_operation() -> dict[str, Any]:
    return {
        "parameters": [
            {"name": "id", "dataType": {"primitive": "string", "subType": "uuid"}},
        ],
        "responses": {"204": {}},
    }
