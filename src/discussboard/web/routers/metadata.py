"""Metadata endpoints for exposing service information."""

from fastapi import APIRouter

from discussboard.web.deps import AppDep

router = APIRouter(tags=["metadata"])


@router.get(
    "/",
    summary="Get service name",
    operation_id="getServiceInfo",
    responses={200: {"description": "Service name"}},
)
async def get_service_info() -> dict[str, str]:
    return {"name": "DiscussBoard"}


@router.get(
    "/metadata/version",
    summary="Get version information",
    description="Returns build and version information including package version, git commit hash, commit date, and build time.",
    operation_id="getVersion",
    responses={200: {"description": "Version and build information"}},
)
async def get_version(app: AppDep) -> dict[str, str]:
    """Get version information."""
    return app.get_version()
