"""Rig runtime configuration and settings."""
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class RigConfig:
    """Runtime configuration for Rig operations.

    Attributes:
        giter8_root: Directory inside a giter8 repository that holds the template
        clone_timeout: Timeout in seconds for cloning a template repository (default: 300)
        log_file: Log file path, None for the default location
        default_project_name: Name used when the template defines no ``name``
    """

    giter8_root: str = "src/main/g8"
    clone_timeout: int = 300  # 5 minutes for large template repositories
    log_file: Optional[str] = None
    default_project_name: str = "Rig Generated Project"

    @classmethod
    def from_env(cls) -> "RigConfig":
        """Create config from environment variables.

        Environment variables:
            RIG_GITER8_ROOT: Template directory inside giter8 repositories
            RIG_CLONE_TIMEOUT: Clone timeout in seconds
            RIG_LOG_FILE: Log file path

        Returns:
            RigConfig instance with values from environment or defaults
        """
        return cls(
            giter8_root=os.getenv("RIG_GITER8_ROOT", cls.giter8_root),
            clone_timeout=int(os.getenv("RIG_CLONE_TIMEOUT", cls.clone_timeout)),
            log_file=os.getenv("RIG_LOG_FILE") or None,
        )


# Global config instance (can be overridden)
_config: Optional[RigConfig] = None


def get_config() -> RigConfig:
    """Get the global Rig configuration.

    Returns:
        RigConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = RigConfig.from_env()
    return _config


def set_config(config: Optional[RigConfig]):
    """Set the global Rig configuration.

    Args:
        config: RigConfig instance to use globally, or None to re-read the environment
    """
    global _config
    _config = config
