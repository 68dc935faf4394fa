"""
Storage abstraction.

- interfaces: repository ABCs and the ``StoreBundle`` handed to services
- rest: thin client and repositories for the hosted data API
- backends: backend lifecycle and the ``STORE_BACKEND`` factory
"""

from .interfaces import GameSettingsRepository, StoreBundle, UserRepository

__all__ = ["GameSettingsRepository", "StoreBundle", "UserRepository"]
