"""Password hashing with bcrypt and login tokens as signed JWTs."""

from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from blog.application.interfaces import CredentialService, TokenPair


class BcryptJWTCredentialService(CredentialService):
    """Issues an access/refresh JWT pair signed with separate secrets."""

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        algorithm: str = "HS256",
        access_ttl: timedelta = timedelta(minutes=15),
        refresh_ttl: timedelta = timedelta(days=30),
    ):
        self._access_secret = access_secret
        self._refresh_secret = refresh_secret
        self._algorithm = algorithm
        self._access_ttl = access_ttl
        self._refresh_ttl = refresh_ttl

    def hash_password(self, password: str) -> str:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError:
            return False

    def issue_tokens(self, user_id: int) -> TokenPair:
        issued_at = datetime.now(timezone.utc)
        return TokenPair(
            access_token=self._sign(user_id, "access", issued_at + self._access_ttl, self._access_secret),
            refresh_token=self._sign(user_id, "refresh", issued_at + self._refresh_ttl, self._refresh_secret),
        )

    def _sign(self, user_id: int, token_type: str, expires_at: datetime, secret: str) -> str:
        payload = {
            "sub": str(user_id),
            "type": token_type,
            "iat": datetime.now(timezone.utc),
            "exp": expires_at,
        }
        return jwt.encode(payload, secret, algorithm=self._algorithm)
