"""
Mock account and session tests for StudyBloom.
"""

from studybloom.classroom import UserSession, hash_password
from studybloom.schemas import SignupData, UserRole
from studybloom.utils import CURRENT_USER_KEY, USERS_KEY


def signup_data(**overrides):
    fields = dict(
        email="ada@example.com",
        password="secret",
        username="ada",
        first_name="Ada",
        last_name="Lovelace",
        role=UserRole.EDUCATOR,
    )
    fields.update(overrides)
    return SignupData(**fields)


class TestPasswordHash:

    def test_salted(self):
        assert hash_password("pw", "a") != hash_password("pw", "b")
        assert hash_password("pw", "a") == hash_password("pw", "a")


class TestSignup:
    """Test account creation."""

    def test_signup_signs_in(self, store):
        session = UserSession(store)
        assert session.signup(signup_data()) is True
        assert session.is_authenticated
        assert session.current_user.display_name == "Ada Lovelace"
        assert session.current_user.role == UserRole.EDUCATOR

    def test_password_not_stored_in_plain(self, store):
        UserSession(store).signup(signup_data())
        account = store.get_json(USERS_KEY)[0]
        assert "password" not in account
        assert account["password_hash"] == hash_password("secret", account["salt"])
        assert "password_hash" not in store.get_json(CURRENT_USER_KEY)

    def test_duplicate_email_or_username(self, store):
        session = UserSession(store)
        session.signup(signup_data())
        assert session.signup(signup_data(username="other")) is False
        assert session.signup(signup_data(email="other@example.com")) is False
        assert len(store.get_json(USERS_KEY)) == 1


class TestLogin:
    """Test sign in, restore and sign out."""

    def test_login(self, store):
        UserSession(store).signup(signup_data())
        session = UserSession(store)
        assert session.login("ada@example.com", "secret") is True
        assert session.current_user.username == "ada"

    def test_wrong_password(self, store):
        UserSession(store).signup(signup_data())
        session = UserSession(store)
        session.logout()
        assert session.login("ada@example.com", "wrong") is False
        assert session.login("nobody@example.com", "secret") is False
        assert not session.is_authenticated

    def test_load_restores_user(self, store):
        UserSession(store).signup(signup_data())
        session = UserSession(store)
        assert session.current_user is None
        assert session.load().username == "ada"

    def test_load_malformed_user(self, store):
        store.set_json(CURRENT_USER_KEY, {"id": "x"})
        session = UserSession(store)
        assert session.load() is None
        assert store.get_json(CURRENT_USER_KEY) is None

    def test_logout(self, store):
        session = UserSession(store)
        session.signup(signup_data())
        session.logout()
        assert not session.is_authenticated
        assert UserSession(store).load() is None


class TestUpdateProfile:
    """Test profile edits."""

    def test_requires_sign_in(self, store):
        assert UserSession(store).update_profile(bio="hi") is None

    def test_updates_account_and_current_user(self, store):
        session = UserSession(store)
        session.signup(signup_data())
        updated = session.update_profile(bio="Analyst", first_name="Augusta")

        assert updated.display_name == "Augusta Lovelace"
        assert store.get_json(CURRENT_USER_KEY)["bio"] == "Analyst"
        assert store.get_json(USERS_KEY)[0]["first_name"] == "Augusta"

        session.logout()
        assert session.login("ada@example.com", "secret")
        assert session.current_user.bio == "Analyst"
