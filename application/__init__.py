"""
Application layer - Application services and use cases.

Contains:
- Vending machine API facade
- Command handlers
"""

from .api_facade import VendingMachineFacade
from .command_handler import CommandHandler, CommandResponse


__all__ = [
    "VendingMachineFacade",
    "CommandHandler",
    "CommandResponse",
]
