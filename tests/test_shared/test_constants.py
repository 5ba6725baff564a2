"""
Tests for API constants.
"""

from ptero_admin import __version__
from ptero_admin.shared import constants


class TestConstants:
    def test_namespace(self):
        assert constants.API_NAMESPACE == "api/application"

    def test_paths_are_relative(self):
        paths = [value for name, value in vars(constants).items() if name.startswith("API_") and name != "API_NAMESPACE"]
        assert paths
        for path in paths:
            assert not path.startswith("/")
            assert "://" not in path

    def test_path_templates(self):
        assert constants.API_SERVER.format(server_id=1) == "servers/1"
        assert constants.API_USER_EXTERNAL.format(external_id="x") == "users/external/x"

    def test_methods(self):
        assert set(constants.SUPPORTED_METHODS) == {"GET", "POST", "PATCH", "DELETE"}
        assert set(constants.BODYLESS_METHODS) <= set(constants.SUPPORTED_METHODS)

    def test_user_agent_carries_version(self):
        assert constants.USER_AGENT == f"ptero-admin/{__version__}"
