"""
Promotion Service.

Business operations behind the HTTP API. Each method validates the presence
of its inputs, performs a single read or write through the store and returns
domain objects; failures are raised as ``PromoError`` subclasses that the
exception handlers turn into ``{"error": ...}`` responses.
"""

from typing import Any, List, Optional

from promogame.core.errors import (
    InvalidCredentialsError,
    MissingFieldsError,
    PaymentNotApprovedError,
    StoreError,
    UserAlreadyExistsError,
    UserNotFoundError,
)
from promogame.core.logging_config import get_logger
from promogame.core.models.domain import (
    DEFAULT_GAME_SETTINGS,
    GameSettingsValues,
    NewUser,
    PaymentStatus,
    User,
    UserId,
)
from promogame.core.security import hash_password, secrets_match, verify_password
from promogame.core.store.interfaces import StoreBundle
from promogame.server.core.config import Settings

logger = get_logger(__name__)


def _present(value: Any) -> bool:
    """Presence test for required inputs: None and empty strings are missing."""
    if value is None:
        return False
    if isinstance(value, str):
        return value.strip() != ""
    return True


def _require(message: str, *values: Any) -> None:
    if not all(_present(v) for v in values):
        raise MissingFieldsError(message)


class PromotionService:
    """Registration, login, payments, admin review and game configuration."""

    def __init__(self, store: StoreBundle, settings: Settings) -> None:
        self.store = store
        self.settings = settings

    # ------------------------------------------------------------------
    # Players
    # ------------------------------------------------------------------

    async def register(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        age_consent: Optional[bool] = None,
    ) -> User:
        """Create a user with zero chances and a ``pending`` payment."""
        _require("Name, email, and password are required", name, email, password)

        if await self.store.users.get_by_email(email):
            raise UserAlreadyExistsError()

        user = await self.store.users.create(
            NewUser(
                name=name,
                email=email,
                password_hash=hash_password(password, self.settings.password_salt),
                age_consent=age_consent,
            )
        )
        logger.info(f"Registered user {user.id} ({user.email})")
        return user

    def is_admin_login(self, email: str, password: str) -> bool:
        admin = self.settings.admin
        return secrets_match(email, admin.email) and secrets_match(password, admin.password)

    async def login(self, email: Optional[str], password: Optional[str]) -> Optional[User]:
        """Authenticate a player.

        Returns:
            The user, or None when the credentials are the configured admin's.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password.
            PaymentNotApprovedError: Credentials are valid but the payment is not approved.
        """
        _require("Email and password are required", email, password)

        if self.is_admin_login(email, password):
            logger.info("Admin login")
            return None

        user = await self.store.users.get_by_email(email)
        if user is None or not verify_password(password, user.password, self.settings.password_salt):
            raise InvalidCredentialsError()

        if not user.is_approved:
            raise PaymentNotApprovedError()

        return user

    async def get_user_status(self, email: Optional[str]) -> User:
        _require("Email is required", email)
        user = await self.store.users.get_by_email(email)
        if user is None:
            raise UserNotFoundError()
        return user

    async def update_game_chances(self, user_id: Optional[UserId], game_chances: Optional[int]) -> User:
        _require("User ID and game chances are required", user_id, game_chances)
        return await self._update_user(user_id, {"game_chances": game_chances})

    async def record_win(self, user_id: Optional[UserId]) -> User:
        _require("User ID is required", user_id)
        user = await self._update_user(user_id, {"win": True})
        logger.info(f"Recorded win for user {user.id}")
        return user

    async def submit_payment(self, email: Optional[str], upi_id: Optional[str], utr_number: Optional[str]) -> User:
        """Attach payment proof to the user and mark it for admin review."""
        _require("Email, UPI ID, and UTR number are required", email, upi_id, utr_number)

        if await self.store.users.get_by_email(email) is None:
            raise UserNotFoundError()

        user = await self.store.users.update_by_email(
            email,
            {
                "upi_id": upi_id,
                "utr_number": utr_number,
                "payment_status": PaymentStatus.pending_approval.value,
            },
        )
        if user is None:
            raise StoreError("Failed to update user payment information")
        logger.info(f"Payment submitted by user {user.id}")
        return user

    # ------------------------------------------------------------------
    # Admin
    # ------------------------------------------------------------------

    async def list_payment_requests(self) -> List[User]:
        return await self.store.users.list_payment_requests()

    async def approve_payment(self, user_id: Optional[UserId]) -> User:
        _require("User ID is required", user_id)
        user = await self._update_user(
            user_id,
            {
                "payment_status": PaymentStatus.approved.value,
                "game_chances": self.settings.approval_game_chances,
            },
        )
        logger.info(f"Approved payment of user {user.id}")
        return user

    async def deny_payment(self, user_id: Optional[UserId]) -> User:
        _require("User ID is required", user_id)
        user = await self._update_user(user_id, {"payment_status": PaymentStatus.denied.value})
        logger.info(f"Denied payment of user {user.id}")
        return user

    # ------------------------------------------------------------------
    # Game settings
    # ------------------------------------------------------------------

    async def get_game_settings(self) -> GameSettingsValues:
        """Current settings, or the defaults when none were saved."""
        current = await self.store.game_settings.get_current()
        if current is None:
            return DEFAULT_GAME_SETTINGS
        return current

    async def update_game_settings(
        self,
        trial_speed: Optional[float],
        trial_precision: Optional[float],
        logged_in_speed: Optional[float],
        logged_in_precision: Optional[float],
    ) -> GameSettingsValues:
        _require(
            "All settings fields are required",
            trial_speed,
            trial_precision,
            logged_in_speed,
            logged_in_precision,
        )
        saved = await self.store.game_settings.save(
            GameSettingsValues(
                trial_speed=trial_speed,
                trial_precision=trial_precision,
                logged_in_speed=logged_in_speed,
                logged_in_precision=logged_in_precision,
            )
        )
        logger.info("Game settings updated")
        return saved

    # ------------------------------------------------------------------

    async def _update_user(self, user_id: UserId, changes: dict) -> User:
        user = await self.store.users.update(user_id, changes)
        if user is None:
            raise UserNotFoundError()
        return user

