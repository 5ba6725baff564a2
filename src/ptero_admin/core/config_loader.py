"""
ptero-admin - Configuration Loader

Loads panel credentials from multiple sources with cascading priority:
environment variables → config file → keyring.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import keyring
from keyring.errors import KeyringError
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigurationError
from .models import PanelConfig

logger = logging.getLogger("ptero-admin")


class ConfigLoader:
    """
    Configuration loader for panel credentials.

    Priority order for credential sources:
    1. Environment variables (highest priority) - for CI/CD and containers
    2. Config file (~/.ptero-admin/config.json) - for multiple panels
    3. Keyring storage (lowest priority)

    The config file is kept at 0600 and API keys are never logged.
    """

    DEFAULT_CONFIG_DIR = Path.home() / ".ptero-admin"
    DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.json"
    REQUIRED_FILE_PERMISSIONS = 0o600
    KEYRING_SERVICE_NAME = "ptero-admin"

    ENV_URL = "PTERO_PANEL_URL"
    ENV_API_KEY = "PTERO_API_KEY"
    ENV_VERIFY_SSL = "PTERO_VERIFY_SSL"
    ENV_TIMEOUT = "PTERO_TIMEOUT"

    @classmethod
    def load(cls, profile: str = "default") -> PanelConfig:
        """
        Load panel configuration for the specified profile.

        Args:
            profile: Profile name to load (default: "default")

        Returns:
            PanelConfig with credentials

        Raises:
            ConfigurationError: If no credentials found or configuration invalid
        """
        logger.debug(f"Loading configuration for profile: {profile}")

        config = cls._load_from_env()
        if config:
            logger.info("Loaded configuration from environment variables")
            return config

        config = cls._load_from_config_file(profile)
        if config:
            logger.info(f"Loaded configuration for profile '{profile}' from config file")
            return config

        config = cls._load_from_keyring(profile)
        if config:
            logger.info(f"Loaded configuration for profile '{profile}' from keyring")
            return config

        raise ConfigurationError(
            f"No credentials found for profile '{profile}'. "
            f"Configure credentials with 'ptero-admin setup' or set environment variables "
            f"({cls.ENV_URL}, {cls.ENV_API_KEY})"
        )

    @classmethod
    def _load_from_env(cls) -> Optional[PanelConfig]:
        """Load configuration from environment variables."""
        url = os.getenv(cls.ENV_URL)
        api_key = os.getenv(cls.ENV_API_KEY)

        if not (url and api_key):
            return None

        verify_ssl = os.getenv(cls.ENV_VERIFY_SSL, "true").lower() in ("true", "1", "yes")
        values: Dict[str, Any] = {"url": url, "api_key": api_key, "verify_ssl": verify_ssl}
        timeout = os.getenv(cls.ENV_TIMEOUT)
        if timeout:
            values["timeout"] = timeout

        try:
            return PanelConfig(**values)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid credentials in environment variables: {e}") from e

    @classmethod
    def _read_config_file(cls) -> Dict[str, Any]:
        config_file = cls.DEFAULT_CONFIG_FILE
        cls._verify_file_permissions(config_file)
        try:
            with open(config_file, 'r') as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file: {e}") from e

    @classmethod
    def _write_config_file(cls, config_data: Dict[str, Any]) -> None:
        config_file = cls.DEFAULT_CONFIG_FILE
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, 'w') as f:
            json.dump(config_data, f, indent=2)
        cls._set_secure_permissions(config_file)

    @classmethod
    def _load_from_config_file(cls, profile: str) -> Optional[PanelConfig]:
        """Load configuration from config file."""
        if not cls.DEFAULT_CONFIG_FILE.exists():
            logger.debug(f"Config file not found: {cls.DEFAULT_CONFIG_FILE}")
            return None

        config_data = cls._read_config_file()
        if profile not in config_data:
            logger.debug(f"Profile '{profile}' not found in config file")
            return None

        try:
            return PanelConfig(**config_data[profile])
        except (PydanticValidationError, TypeError) as e:
            raise ConfigurationError(f"Invalid profile '{profile}' in config file: {e}") from e

    @classmethod
    def _load_from_keyring(cls, profile: str) -> Optional[PanelConfig]:
        """Load configuration stored in the OS keyring under the profile name."""
        try:
            stored = keyring.get_password(cls.KEYRING_SERVICE_NAME, profile)
        except KeyringError as e:
            logger.debug(f"Could not read keyring: {e}")
            return None

        if not stored:
            return None

        try:
            return PanelConfig(**json.loads(stored))
        except (ValueError, TypeError) as e:
            raise ConfigurationError(f"Invalid keyring entry for profile '{profile}': {e}") from e

    @classmethod
    def save_profile(cls, profile: str, config: PanelConfig) -> None:
        """
        Save configuration profile to config file.

        Args:
            profile: Profile name
            config: Panel configuration to save
        """
        config_data = cls._read_config_file() if cls.DEFAULT_CONFIG_FILE.exists() else {}
        config_data[profile] = config.model_dump()
        cls._write_config_file(config_data)
        logger.info(f"Saved profile '{profile}' to config file")

    @classmethod
    def delete_profile(cls, profile: str) -> None:
        """
        Delete a profile from config file.

        Raises:
            ConfigurationError: If profile doesn't exist
        """
        if not cls.DEFAULT_CONFIG_FILE.exists():
            raise ConfigurationError(f"Config file not found: {cls.DEFAULT_CONFIG_FILE}")

        config_data = cls._read_config_file()
        if profile not in config_data:
            raise ConfigurationError(f"Profile '{profile}' not found")

        del config_data[profile]
        cls._write_config_file(config_data)
        logger.info(f"Deleted profile '{profile}' from config file")

    @classmethod
    def list_profiles(cls) -> List[str]:
        """List all profiles in the config file."""
        if not cls.DEFAULT_CONFIG_FILE.exists():
            return []
        return list(cls._read_config_file().keys())

    @classmethod
    def get_profile_info(cls, profile: str) -> Dict[str, Any]:
        """
        Get non-sensitive information about a profile.

        Returns:
            Dictionary with URL, verify_ssl, timeout and an API key preview

        Raises:
            ConfigurationError: If profile doesn't exist
        """
        if not cls.DEFAULT_CONFIG_FILE.exists():
            raise ConfigurationError(f"Config file not found: {cls.DEFAULT_CONFIG_FILE}")

        config_data = cls._read_config_file()
        if profile not in config_data:
            raise ConfigurationError(f"Profile '{profile}' not found")

        profile_config = config_data[profile]
        api_key = profile_config.get("api_key", "")
        return {
            "url": profile_config["url"],
            "verify_ssl": profile_config.get("verify_ssl", True),
            "timeout": profile_config.get("timeout", 30.0),
            "api_key_preview": f"{api_key[:4]}...{api_key[-4:]}" if len(api_key) > 8 else "****",
        }

    @classmethod
    def _set_secure_permissions(cls, file_path: Path) -> None:
        """Set secure file permissions (0600 - owner read/write only)."""
        try:
            os.chmod(file_path, cls.REQUIRED_FILE_PERMISSIONS)
        except OSError as e:
            logger.warning(f"Could not set secure permissions on {file_path}: {e}")

    @classmethod
    def _verify_file_permissions(cls, file_path: Path) -> None:
        """Verify file has secure permissions, tightening them if not."""
        try:
            current_perms = os.stat(file_path).st_mode & 0o777
        except OSError as e:
            logger.debug(f"Could not verify file permissions: {e}")
            return

        if current_perms != cls.REQUIRED_FILE_PERMISSIONS:
            logger.warning(
                f"Config file {file_path} has insecure permissions {oct(current_perms)}. "
                f"Recommended: {oct(cls.REQUIRED_FILE_PERMISSIONS)}"
            )
            cls._set_secure_permissions(file_path)
