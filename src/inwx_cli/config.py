"""
CLI Configuration

Handles configuration loading and management.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


# Default config locations
DEFAULT_CONFIG_PATHS = [
    Path.home() / ".inwx" / "config.yaml",
    Path.home() / ".config" / "inwx" / "config.yaml",
    Path("inwx_config.yaml"),
]

ENV_USERNAME = "INWX_USERNAME"
ENV_PASSWORD = "INWX_PASSWORD"
ENV_SANDBOX = "INWX_SANDBOX"
ENV_LOG = "INWX_LOG"


@dataclass
class APIConfig:
    """API endpoint configuration."""
    sandbox: bool = False
    timeout: int = 30
    verify: bool = True


@dataclass
class CredentialsConfig:
    """Credentials configuration."""
    username: Optional[str] = None
    password: Optional[str] = None


@dataclass
class CLIConfig:
    """Complete CLI configuration."""
    api: APIConfig = field(default_factory=APIConfig)
    credentials: CredentialsConfig = field(default_factory=CredentialsConfig)
    log_level: str = "WARNING"
    profile: str = "default"

    @classmethod
    def from_dict(cls, data: dict, profile: str = "default") -> "CLIConfig":
        """
        Create config from dictionary.

        Args:
            data: Configuration dictionary
            profile: Profile name to use

        Returns:
            CLIConfig instance
        """
        # Get profile-specific config or use root
        if "profiles" in data and profile in data["profiles"]:
            profile_data = data["profiles"][profile] or {}
        else:
            profile_data = data

        api_data = profile_data.get("api") or {}
        api = APIConfig(
            sandbox=bool(api_data.get("sandbox", False)),
            timeout=int(api_data.get("timeout", 30)),
            verify=bool(api_data.get("verify", True)),
        )

        creds_data = profile_data.get("credentials") or {}
        credentials = CredentialsConfig(
            username=creds_data.get("username"),
            password=creds_data.get("password"),
        )

        return cls(
            api=api,
            credentials=credentials,
            log_level=str(profile_data.get("log_level", "WARNING")).upper(),
            profile=profile,
        )

    @classmethod
    def from_file(cls, path: Path, profile: str = "default") -> "CLIConfig":
        """
        Load config from YAML file.

        Args:
            path: Path to config file
            profile: Profile name to use

        Returns:
            CLIConfig instance
        """
        with open(path) as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {}, profile)

    @classmethod
    def find_and_load(cls, profile: str = "default") -> Optional["CLIConfig"]:
        """
        Find and load config from default locations.

        Returns:
            CLIConfig instance or None if not found
        """
        for path in DEFAULT_CONFIG_PATHS:
            if path.exists():
                return cls.from_file(path, profile)
        return None

    def apply_env(self, environ=None) -> "CLIConfig":
        """
        Fill unset values from INWX_* environment variables.

        Credentials from the environment only apply when the config file
        left them empty. INWX_SANDBOX and INWX_LOG override the file.
        """
        environ = os.environ if environ is None else environ

        if not self.credentials.username:
            self.credentials.username = environ.get(ENV_USERNAME) or None
        if not self.credentials.password:
            self.credentials.password = environ.get(ENV_PASSWORD) or None

        sandbox = environ.get(ENV_SANDBOX)
        if sandbox:
            self.api.sandbox = _is_truthy(sandbox)

        log_level = environ.get(ENV_LOG)
        if log_level:
            self.log_level = log_level.upper()

        return self


def _is_truthy(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def create_sample_config() -> str:
    """
    Generate sample configuration YAML.

    Returns:
        Sample config as YAML string
    """
    return """# INWX Client Configuration
# Default location: ~/.inwx/config.yaml

api:
  sandbox: false
  timeout: 30
  verify: true

credentials:
  username: your-username
  password: your-password

# DEBUG, INFO, WARNING or ERROR (INWX_LOG overrides)
log_level: WARNING

# Multiple profiles example (optional)
profiles:
  production:
    credentials:
      username: prod_user

  ote:
    api:
      sandbox: true
    credentials:
      username: ote_user
"""
