from typing import Annotated, cast

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from discussboard.app import App

# Security scheme for admin-only endpoints; the comparison itself happens in AccessService
admin_password_scheme = APIKeyHeader(name="X-Admin-Password", scheme_name="AdminPassword", auto_error=False)


async def get_app(request: Request) -> App:
    return cast(App, request.app.state.app)


# Type aliases for dependencies
AppDep = Annotated[App, Depends(get_app)]
AdminPasswordDep = Annotated[str | None, Depends(admin_password_scheme)]
