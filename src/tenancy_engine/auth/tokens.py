"""Signed, expiring session tokens."""

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from tenancy_engine.common.exceptions import InvalidTokenError

SALT = "session-token"


class TokenSigner:
    """Issues and verifies session tokens carrying a user id as subject."""

    def __init__(self, secret_key: str, max_age: int):
        self.max_age = max_age
        self._serializer = URLSafeTimedSerializer(secret_key, salt=SALT)

    def issue(self, user_id: str) -> str:
        return self._serializer.dumps({"sub": user_id})

    def verify(self, token: str) -> str:
        """Return the subject user id, or raise InvalidTokenError."""
        try:
            payload = self._serializer.loads(token, max_age=self.max_age)
        except SignatureExpired:
            raise InvalidTokenError("Token has expired")
        except BadSignature:
            raise InvalidTokenError()
        if not isinstance(payload, dict) or not isinstance(payload.get("sub"), str):
            raise InvalidTokenError()
        return payload["sub"]
