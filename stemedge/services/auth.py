"""
Thin client over the Supabase auth/profile backend.
"""
from pydantic import ValidationError
from stemedge.core.config import get_settings
from stemedge.models.schemas import AuthResult, UserProfile
from stemedge.utils.error_messages import format_auth_error
import logging

logger = logging.getLogger(__name__)

NOT_CONFIGURED = "Sign-in is not available right now."


def create_supabase_client():
    from supabase import create_client

    settings = get_settings()
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


class AuthService:
    """Login, logout and profile lookups. Errors are returned, not raised."""

    def __init__(self, client=None):
        settings = get_settings()
        self.profile_table = settings.SUPABASE_PROFILE_TABLE
        self.client = client

        if self.client is None and settings.SUPABASE_URL and settings.SUPABASE_KEY:
            self.client = create_supabase_client()
        elif self.client is None:
            logger.warning("SUPABASE_URL/SUPABASE_KEY not set. Authentication disabled.")

    def login(self, email: str, password: str) -> AuthResult:
        if self.client is None:
            return AuthResult(error=NOT_CONFIGURED)

        try:
            response = self.client.auth.sign_in_with_password({"email": email, "password": password})
            if not response.user or not response.session:
                return AuthResult(error="Login failed")

            profile = self._load_profile(response.user.id)
            if profile is None:
                return AuthResult(error="User profile not found")

            logger.info(f"User {profile.id} signed in as {profile.role}")
            return AuthResult(user=profile, access_token=response.session.access_token)
        except Exception as e:
            logger.warning(f"Login failed for {email}: {e}")
            return AuthResult(error=format_auth_error(e))

    def logout(self) -> AuthResult:
        if self.client is None:
            return AuthResult(error=NOT_CONFIGURED)
        try:
            self.client.auth.sign_out()
            return AuthResult()
        except Exception as e:
            logger.warning(f"Logout failed: {e}")
            return AuthResult(error=format_auth_error(e))

    def current_user(self, access_token: str | None) -> UserProfile | None:
        """Profile for a session token, or None if it can't be resolved."""
        if self.client is None or not access_token:
            return None
        try:
            response = self.client.auth.get_user(access_token)
            if response is None or response.user is None:
                return None
            return self._load_profile(response.user.id)
        except Exception as e:
            logger.info(f"Could not resolve current user: {e}")
            return None

    def greeting(self, user: UserProfile | None) -> str:
        if user is None:
            return "Welcome, explorer! Sign in to save your progress."
        return f"Welcome back, {display_name(user)}!"

    def _load_profile(self, user_id: str) -> UserProfile | None:
        result = (
            self.client.table(self.profile_table)
            .select("*")
            .eq("id", user_id)
            .single()
            .execute()
        )
        if not result.data:
            return None
        try:
            return UserProfile.model_validate(result.data)
        except ValidationError as e:
            logger.error(f"Malformed profile row for {user_id}: {e}")
            return None


def display_name(user: UserProfile) -> str:
    """Usernames are email addresses; greet by the part before the @."""
    return user.username.split("@", 1)[0]


_auth_service = None


def get_auth_service() -> AuthService:
    global _auth_service
    if _auth_service is None:
        _auth_service = AuthService()
    return _auth_service
