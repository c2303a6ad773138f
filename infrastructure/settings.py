"""
Application settings.

Provides typed configuration sections aggregated in a single settings object.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import Optional


# =============================================================================
# Configuration Classes
# =============================================================================


@dataclass(frozen=True)
class RedisSettings:
    """Redis connection settings."""

    host: str = "localhost"
    port: int = 6379
    decode_responses: bool = True


@dataclass(frozen=True)
class VendingSettings:
    """Vending machine settings."""

    initial_deposit: Decimal = Decimal("10.0")
    max_balance: Optional[Decimal] = None
    inventory_resource: str = "VendingInventory"
    inventory_type: str = "plist"
    resource_dir: Optional[Path] = None


@dataclass(frozen=True)
class CommandSettings:
    """Command transport settings."""

    command_channel: str = "vending_machine_commands"

    @property
    def response_channel(self) -> str:
        """Get response channel name."""
        return f"{self.command_channel}_response"


# =============================================================================
# Main Settings
# =============================================================================


@dataclass
class Settings:
    """
    Main application settings.

    Aggregates all configuration sections.
    """

    redis: RedisSettings = field(default_factory=RedisSettings)
    vending: VendingSettings = field(default_factory=VendingSettings)
    commands: CommandSettings = field(default_factory=CommandSettings)


# =============================================================================
# Settings Singleton
# =============================================================================


_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns:
        Settings instance.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
