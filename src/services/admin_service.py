"""Account and authorization service backed by Streamlit session state."""
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

import streamlit as st

from src.models.user import User
from src.utils.settings import get_admin_credentials
from src.utils.validation import validate_name

logger = logging.getLogger(__name__)

ADMIN_POLICY = "Admin"

USER_NAME_KEY = "user_name"
ADMIN_AUTHENTICATED_KEY = "admin_authenticated"


@dataclass(frozen=True)
class AuthorizationResult:
    """Outcome of a policy check."""

    succeeded: bool


class AuthorizationService:
    """
    Evaluates named policies against a user.

    Policies are plain predicates over ``User``; the "Admin" policy is
    registered by default.
    """

    def __init__(self, policies: Optional[Dict[str, Callable[[User], bool]]] = None) -> None:
        self._policies = {ADMIN_POLICY: lambda user: user.is_admin}
        if policies:
            self._policies.update(policies)

    async def authorize(self, user: User, policy_name: str) -> AuthorizationResult:
        """
        Check a user against a policy.

        Raises:
            ValueError: If no policy with that name is registered
        """
        try:
            policy = self._policies[policy_name]
        except KeyError:
            raise ValueError(f"Unknown authorization policy: {policy_name}") from None

        return AuthorizationResult(succeeded=bool(policy(user)))


def authenticate_admin(username: str, password: str) -> bool:
    """
    Authenticate admin credentials.

    Args:
        username: Admin username
        password: Admin password

    Returns:
        True if credentials valid, False otherwise

    Behavior:
        - Reads credentials from environment variables (or .env)
        - An unset ADMIN_PASSWORD disables admin login
    """
    admin_username, admin_password = get_admin_credentials()

    if not admin_password:
        return False

    return username == admin_username and password == admin_password


def get_current_user() -> User:
    """
    Build the current user from session state.

    Returns:
        User: anonymous when nobody signed in
    """
    name = st.session_state.get(USER_NAME_KEY)
    if not name:
        return User()
    return User(name=name, is_admin=is_admin_authenticated())


def sign_in(name: str) -> Tuple[bool, str]:
    """
    Sign in an attendee by name.

    Returns:
        Tuple of (success: bool, message: str)
    """
    is_valid, error_msg = validate_name(name)
    if not is_valid:
        return False, error_msg

    st.session_state[USER_NAME_KEY] = name.strip()
    logger.info("Attendee %s signed in", name.strip())
    return True, "登入成功"


def sign_out() -> None:
    """Sign out the attendee and drop any admin claim."""
    st.session_state.pop(USER_NAME_KEY, None)
    logout_admin()


def is_admin_authenticated() -> bool:
    """
    Check if admin is authenticated in current session.

    Returns:
        True if st.session_state['admin_authenticated'] is True
    """
    return st.session_state.get(ADMIN_AUTHENTICATED_KEY, False)


def login_admin(username: str, password: str) -> Tuple[bool, str]:
    """
    Log in admin user; the admin also becomes the signed-in attendee.

    Returns:
        Tuple of (success: bool, message: str)
        - (True, "登入成功") on success
        - (False, "帳號或密碼錯誤") on failure
    """
    if authenticate_admin(username, password):
        st.session_state[ADMIN_AUTHENTICATED_KEY] = True
        st.session_state[USER_NAME_KEY] = username
        logger.info("Admin %s logged in", username)
        return True, "登入成功"
    else:
        logger.warning("Failed admin login for %r", username)
        return False, "帳號或密碼錯誤"


def logout_admin() -> None:
    """Drop the admin claim from the current session."""
    if ADMIN_AUTHENTICATED_KEY in st.session_state:
        del st.session_state[ADMIN_AUTHENTICATED_KEY]
