from discussboard.web.routers.discussion import router as discussion_router
from discussboard.web.routers.metadata import router as metadata_router

__all__ = [
    "discussion_router",
    "metadata_router",
]
