"""
UserSession - Local mock sign-in backed by the key-value store.

Accounts live under the "users" key and the signed-in profile under
"currentUser". This is a convenience for attributing authored courses,
not an authentication system.

A session is created once per app run, restored with load(), passed to
whatever needs the current user, and torn down with logout().
"""

import hashlib
import hmac
import logging
import secrets
import time
from datetime import datetime
from typing import Optional

from pydantic import ValidationError

from studybloom.schemas import SignupData, UserProfile
from studybloom.utils.storage import KeyValueStore, USERS_KEY, CURRENT_USER_KEY

logger = logging.getLogger(__name__)


def hash_password(password: str, salt: str) -> str:
    """Salted SHA-256 digest of a password."""
    return hashlib.sha256(f"{salt}:{password}".encode("utf-8")).hexdigest()


class UserSession:
    """Signed-in user state for one app session."""

    def __init__(self, store: KeyValueStore):
        self.store = store
        self.current_user: Optional[UserProfile] = None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def _get_accounts(self) -> list[dict]:
        accounts = self.store.get_json(USERS_KEY, [])
        if not isinstance(accounts, list):
            logger.warning("Ignoring malformed account list")
            return []
        return accounts

    def _set_current(self, user: Optional[UserProfile]):
        self.current_user = user
        if user is None:
            self.store.remove(CURRENT_USER_KEY)
        else:
            self.store.set_json(CURRENT_USER_KEY, user.model_dump(mode="json", exclude={"display_name"}))

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def load(self) -> Optional[UserProfile]:
        """Restore the signed-in user saved by a previous session."""
        raw = self.store.get_json(CURRENT_USER_KEY)
        if raw is None:
            self.current_user = None
            return None
        try:
            self.current_user = UserProfile.model_validate(raw)
        except ValidationError:
            logger.warning("Discarding malformed saved user")
            self._set_current(None)
        return self.current_user

    def logout(self):
        """Sign out and forget the saved user."""
        if self.current_user:
            logger.info(f"Signed out {self.current_user.username}")
        self._set_current(None)

    # -------------------------------------------------------------------------
    # Accounts
    # -------------------------------------------------------------------------

    def signup(self, data: SignupData) -> bool:
        """
        Create an account and sign in.

        Returns False if the email or username is already taken.
        """
        accounts = self._get_accounts()
        for account in accounts:
            if account.get("email") == data.email or account.get("username") == data.username:
                return False

        profile = UserProfile(
            id=f"user_{int(time.time() * 1000)}",
            email=data.email,
            username=data.username,
            first_name=data.first_name,
            last_name=data.last_name,
            role=data.role,
            join_date=datetime.now(),
        )
        salt = secrets.token_hex(8)
        accounts.append({
            **profile.model_dump(mode="json", exclude={"display_name"}),
            "salt": salt,
            "password_hash": hash_password(data.password, salt),
        })
        self.store.set_json(USERS_KEY, accounts)

        self._set_current(profile)
        logger.info(f"Created account {profile.username}")
        return True

    def login(self, email: str, password: str) -> bool:
        """Sign in with email and password. Returns False on mismatch."""
        for account in self._get_accounts():
            if account.get("email") != email:
                continue
            expected = account.get("password_hash", "")
            actual = hash_password(password, account.get("salt", ""))
            if not hmac.compare_digest(expected, actual):
                return False
            try:
                profile = UserProfile.model_validate(account)
            except ValidationError:
                logger.warning(f"Account record for {email!r} is malformed")
                return False
            self._set_current(profile)
            return True
        return False

    def update_profile(self, **updates) -> Optional[UserProfile]:
        """
        Apply field updates to the signed-in profile and its account record.

        Returns the updated profile, or None when nobody is signed in.
        """
        if self.current_user is None:
            return None

        updated = self.current_user.model_copy(update=updates)
        updated = UserProfile.model_validate(updated.model_dump())

        accounts = self._get_accounts()
        for account in accounts:
            if account.get("id") == updated.id:
                account.update(updated.model_dump(mode="json", exclude={"display_name"}))
        self.store.set_json(USERS_KEY, accounts)

        self._set_current(updated)
        return updated
