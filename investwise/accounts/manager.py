"""
Account Manager

Creates accounts and authenticates logins against the user store.

DESIGN DECISION: Account ids are drawn uniformly at random from the
configured range. A drawn id that is already taken is drawn again
(bounded by `id_max_attempts`) instead of silently creating two
accounts with the same id.

Whether a new account starts with the demo assets is a setting,
not a fixed rule: some deployments want an empty portfolio, others
want something to look at right after sign-up.
"""

import random
from typing import Optional

import structlog
from tenacity import RetryError, Retrying, retry_if_exception_type, stop_after_attempt

from investwise.audit import AuditLogger
from investwise.config import AccountSettings, get_settings
from investwise.errors import (
    AccountIdExhaustedError,
    DuplicateEmailError,
    InvalidCredentialsError,
)
from investwise.models.records import DEMO_STARTER_ASSETS, User
from investwise.services.storage import PortfolioStorageInterface


logger = structlog.get_logger(__name__)


class _IdTaken(Exception):
    """Drawn id already belongs to a stored user."""
    pass


class AccountManager:
    """
    Account creation and authentication.

    Every call reads the user store fresh; nothing is cached between calls.
    """

    def __init__(
        self,
        storage: PortfolioStorageInterface,
        settings: Optional[AccountSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the manager.

        Args:
            storage: User/asset store
            settings: Account settings; loaded from the environment if None
            audit_logger: Where to record account events
            rng: Random source for account ids (seed it in tests)
        """
        self._storage = storage
        self._settings = settings or get_settings().account
        self._audit_logger = audit_logger or AuditLogger()
        self._rng = rng or random.Random()

    def _draw_free_id(self, taken: set[int]) -> int:
        user_id = self._rng.randint(self._settings.id_min, self._settings.id_max)
        if user_id in taken:
            logger.debug("account_id_collision", user_id=user_id)
            raise _IdTaken(user_id)
        return user_id

    def _new_account_id(self, existing: list[User]) -> int:
        taken = {user.id for user in existing}
        retrying = Retrying(
            stop=stop_after_attempt(self._settings.id_max_attempts),
            retry=retry_if_exception_type(_IdTaken),
        )
        try:
            return retrying(self._draw_free_id, taken)
        except RetryError:
            raise AccountIdExhaustedError(
                f"No free account id found after {self._settings.id_max_attempts} attempts"
            )

    def create_account(self, name: str, email: str, password: str) -> User:
        """
        Register a new user.

        Raises:
            DuplicateEmailError: If the email is already registered
                (any letter case). The store is left untouched.
            AccountIdExhaustedError: If no free id could be drawn
            pydantic.ValidationError: If name, email or password is blank
            StorageError: If the store cannot be read or written
        """
        if not self._storage.validate_email_unique(email):
            self._audit_logger.log_signup_rejected(email, "email already exists")
            raise DuplicateEmailError("Email already exists!")

        user_id = self._new_account_id(self._storage.load_all_users())
        user = User(id=user_id, name=name, email=email, password=password)
        self._storage.save_user(user)

        seeded = 0
        if self._settings.seed_demo_assets:
            demo_assets = [template.for_user(user.id) for template in DEMO_STARTER_ASSETS]
            self._storage.save_assets(demo_assets)
            seeded = len(demo_assets)

        self._audit_logger.log_account_created(user.id, user.email, seeded)
        return user

    def authenticate(self, email: str, password: str) -> User:
        """
        Find the user with this email (any letter case) and exactly this password.

        Raises:
            InvalidCredentialsError: If no stored user matches
            StorageError: If the store cannot be read
        """
        for user in self._storage.load_all_users():
            if user.email_matches(email) and user.password == password:
                self._audit_logger.log_login_succeeded(user.id)
                return user

        self._audit_logger.log_login_failed(email)
        raise InvalidCredentialsError("Invalid email or password!")
