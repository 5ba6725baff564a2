"""
Tests for ptero-admin configuration and pagination models.
"""

import pytest
from pydantic import ValidationError

from ptero_admin.core.models import Meta, PanelConfig


class TestPanelConfig:
    """Test PanelConfig validation."""

    def test_valid_config(self, panel_config_dict):
        config = PanelConfig(**panel_config_dict)

        assert config.url == "https://panel.example.com"
        assert config.api_key == "ptla_test_key_1234567890"
        assert config.verify_ssl is True
        assert config.timeout == 30.0

    def test_defaults(self):
        config = PanelConfig(url="https://panel.example.com", api_key="key")

        assert config.verify_ssl is True
        assert config.timeout == 30.0

    def test_trailing_slash_stripped(self):
        config = PanelConfig(url="https://panel.example.com///", api_key="key")

        assert config.url == "https://panel.example.com"

    def test_http_allowed(self):
        assert PanelConfig(url="http://10.0.0.2:8080", api_key="key").url == "http://10.0.0.2:8080"

    @pytest.mark.parametrize("url", ["panel.example.com", "ftp://panel.example.com", "", "https://"])
    def test_invalid_url(self, url):
        with pytest.raises(ValidationError):
            PanelConfig(url=url, api_key="key")

    def test_empty_api_key_rejected(self):
        with pytest.raises(ValidationError):
            PanelConfig(url="https://panel.example.com", api_key="")

    def test_missing_fields_rejected(self):
        with pytest.raises(ValidationError):
            PanelConfig(url="https://panel.example.com")

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_timeout_must_be_positive(self, timeout):
        with pytest.raises(ValidationError):
            PanelConfig(url="https://panel.example.com", api_key="key", timeout=timeout)

    def test_config_is_read_only(self, panel_config):
        with pytest.raises(ValidationError):
            panel_config.url = "https://other.example.com"

    def test_api_key_hidden_from_repr(self, panel_config):
        assert "ptla_test_key_1234567890" not in repr(panel_config)


class TestMeta:
    """Test pagination metadata parsing."""

    def test_nested_pagination(self, server_list_response):
        meta = Meta.model_validate(server_list_response["meta"])

        assert meta.total == 2
        assert meta.count == 2
        assert meta.per_page == 50
        assert meta.current_page == 1
        assert meta.total_pages == 1

    def test_flat_layout(self):
        meta = Meta.model_validate({"total": 10, "current_page": 2, "total_pages": 5, "per_page": 2})

        assert meta.current_page == 2
        assert meta.has_next_page is True

    def test_empty_links_list_becomes_mapping(self):
        meta = Meta.model_validate({"pagination": {"total": 0, "links": []}})

        assert meta.links == {}

    def test_nested_nulls_are_zero_valued(self):
        meta = Meta.model_validate({"pagination": {"total": None, "current_page": 1, "links": None}})

        assert meta.total == 0
        assert meta.current_page == 1
        assert meta.links == {}

    def test_links_mapping(self, user_list_response):
        meta = Meta.model_validate(user_list_response["meta"])

        assert meta.links["next"].endswith("users?page=2")
        assert meta.has_next_page is True

    def test_absent_meta_is_zero_valued(self):
        meta = Meta()

        assert meta.total == 0
        assert meta.current_page == 0
        assert meta.total_pages == 0
        assert meta.links == {}
        assert meta.has_next_page is False
