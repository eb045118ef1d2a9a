"""Tests for the admin gate."""

import pytest

from discussboard.core.core import Core
from discussboard.errors import AuthorizationError


class TestEnsureAdmin:
    """Tests for shared-secret comparison."""

    def test_matching_password(self, config, storage, admin_password):
        Core(config, storage).services.access.ensure_admin(admin_password)

    @pytest.mark.parametrize("suffix", [" ", "x", "\n"])
    def test_near_miss_rejected(self, config, storage, admin_password, suffix):
        with pytest.raises(AuthorizationError):
            Core(config, storage).services.access.ensure_admin(admin_password + suffix)

    @pytest.mark.parametrize("password", [None, "", "wrong"])
    def test_wrong_or_missing_rejected(self, config, storage, password):
        with pytest.raises(AuthorizationError):
            Core(config, storage).services.access.ensure_admin(password)

    def test_unset_secret_rejects_everything(self, config, storage):
        config = config.model_copy(update={"admin_password": ""})

        with pytest.raises(AuthorizationError):
            Core(config, storage).services.access.ensure_admin("")
