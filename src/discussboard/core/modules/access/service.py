import secrets

import structlog

from discussboard.core.core import Service
from discussboard.errors import AuthorizationError

logger = structlog.get_logger(__name__)


class AccessService(Service):
    """Admin gate based on a single shared secret."""

    def ensure_admin(self, admin_password: str | None) -> None:
        """Ensure the supplied password matches the configured admin secret."""
        expected = self.core.config.admin_password
        # An unset secret means nobody is an admin
        if not expected or not admin_password:
            raise AuthorizationError
        if not secrets.compare_digest(admin_password.encode(), expected.encode()):
            logger.info("admin_password_rejected")
            raise AuthorizationError
