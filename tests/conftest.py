"""Shared fixtures for openapi-gen tests.

Schemas are written to tmp_path so the loader reads real files.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Callable

import pytest


ACCOUNT_SCHEMA: dict[str, Any] = {
    "definitions": {
        "Account": {
            "properties": {
                "user_id": {"type": "string"},
                "wallet": {"type": "integer"},
            }
        }
    }
}


# A trimmed-down swagger document covering every property shape
SAMPLE_SCHEMA: dict[str, Any] = {
    "swagger": "2.0",
    "info": {"title": "sample api", "version": "1.0"},
    "paths": {
        "/v2/account": {
            "get": {
                "summary": "Fetch the current user's account.",
                "operationId": "GetAccount",
                "responses": {
                    "200": {
                        "description": "",
                        "schema": {"$ref": "#/definitions/apiAccount"},
                    }
                },
            },
            "put": {
                "summary": "Update fields in the current user's account.",
                "operationId": "UpdateAccount",
                "responses": {"200": {"description": ""}},
                "parameters": [
                    {
                        "name": "body",
                        "in": "body",
                        "required": True,
                        "schema": {"$ref": "#/definitions/apiUpdateAccountRequest"},
                    }
                ],
            },
            "parameters": [{"name": "ignored", "in": "header", "type": "string"}],
        },
        "/v2/user": {
            "get": {
                "summary": "Fetch zero or more users by ID.",
                "operationId": "GetUsers",
                "parameters": [
                    {
                        "name": "ids",
                        "in": "query",
                        "required": False,
                        "type": "array",
                        "items": {"type": "string"},
                    }
                ],
            }
        },
    },
    "definitions": {
        "apiUser": {
            "type": "object",
            "properties": {
                "id": {"type": "string", "description": "The id of the user's account."},
                "display_name": {"type": "string"},
                "online": {"type": "boolean", "format": "boolean"},
                "edge_count": {"type": "integer", "format": "int32"},
            },
            "description": "A user in the server.",
        },
        "apiAccount": {
            "type": "object",
            "properties": {
                "user": {"$ref": "#/definitions/apiUser"},
                "wallet": {"type": "string"},
                "devices": {
                    "type": "array",
                    "items": {"$ref": "#/definitions/apiAccountDevice"},
                },
                "tags": {"type": "array", "items": {"type": "string"}},
                "scores": {"type": "array", "items": {"type": "integer"}},
                "verify_time": {"type": "string", "format": "date-time"},
            },
            "description": "A user with additional account details.\nAlways the current user.",
        },
        "apiAccountDevice": {
            "type": "object",
            "properties": {"id": {"type": "string"}},
            "description": "Send a device to the server.",
        },
    },
}


@pytest.fixture
def write_schema(tmp_path: Path) -> Callable[..., Path]:
    """Return a callable that writes a schema document and returns its path."""

    def _write(schema: Any, name: str = "schema.json") -> Path:
        path = tmp_path / name
        if isinstance(schema, str):
            path.write_text(schema, encoding="utf-8")
        else:
            path.write_text(json.dumps(schema), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def account_schema() -> dict[str, Any]:
    return copy.deepcopy(ACCOUNT_SCHEMA)


@pytest.fixture
def sample_schema() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_SCHEMA)


@pytest.fixture
def account_schema_path(write_schema) -> Path:
    return write_schema(ACCOUNT_SCHEMA, "account.json")


@pytest.fixture
def sample_schema_path(write_schema) -> Path:
    return write_schema(SAMPLE_SCHEMA, "sample.swagger.json")
