from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="DiscussBoard API",
            version="0.1.0",
            summary="Persistent discussion board with threaded replies",
            routes=app.routes,
        )

        components = openapi_schema.setdefault("components", {})
        components.setdefault("securitySchemes", {})["AdminPassword"] = {
            "type": "apiKey",
            "in": "header",
            "name": "X-Admin-Password",
            "description": "Shared admin secret, required for deleting entries and replies",
        }

        # Only deletions are gated; everything else is public
        for path_item in openapi_schema["paths"].values():
            for method, operation in path_item.items():
                if method.upper() == "DELETE":
                    operation["security"] = [{"AdminPassword": []}]
                else:
                    operation.pop("security", None)

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Name cannot be empty", "type": "validation_error"},
                {"message": "Entry not found", "type": "not_found"},
                {"message": "Invalid admin password", "type": "authorization_error"},
            ]
        }
    }
