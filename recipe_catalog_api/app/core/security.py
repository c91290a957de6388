"""
Security helpers for password hashing and bearer token authentication.

Tokens are compact JSON Web Tokens signed with HMAC (HS256 by
default) and base64url encoded.  They carry the user identifier, the
user's role, an issued-at (``iat``) and an expiration (``exp``)
timestamp.  Signing is done by a ``TokenService`` instance which
receives its secret at construction; the application factory builds
one from ``Settings`` so no signing key lives at module level.

Passwords are hashed with PBKDF2-HMAC-SHA256 and a random 16-byte salt
per password.  The iteration count is stored alongside the salt so it
can be raised later without invalidating existing hashes.

The FastAPI dependencies at the bottom of the module
(``get_current_user`` and ``require_roles``) extract and verify the
bearer token of a request and hand the caller's identity to protected
endpoints.
"""

import base64
import hashlib
import hmac
import json
import os
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .errors import ForbiddenError, InvalidTokenError


_ALGORITHMS: Dict[str, Callable] = {
    "HS256": hashlib.sha256,
    "HS384": hashlib.sha384,
    "HS512": hashlib.sha512,
}

PASSWORD_HASH_SCHEME = "pbkdf2_sha256"
DEFAULT_PASSWORD_ITERATIONS = 100_000


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


@dataclass(frozen=True)
class TokenClaims:
    """Identity extracted from a verified token."""

    user_id: str
    role: str
    issued_at: int
    expires_at: int


class TokenService:
    """Mint and verify signed bearer tokens.

    Parameters
    ----------
    secret_key : str
        HMAC key used to sign and verify tokens.
    algorithm : str
        One of ``HS256``, ``HS384`` or ``HS512``.
    expires_minutes : int
        Token lifetime.  Defaults to 24 hours.
    clock : Callable[[], float]
        Source of the current UNIX time.  Tests replace it to move time
        forward without sleeping.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        expires_minutes: int = 60 * 24,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if not secret_key:
            raise ValueError("A non-empty secret key is required to sign tokens")
        if algorithm not in _ALGORITHMS:
            raise ValueError(f"Unsupported token algorithm: {algorithm}")
        self._secret = secret_key.encode("utf-8")
        self.algorithm = algorithm
        self.expires_seconds = expires_minutes * 60
        self._clock = clock

    def _sign(self, message: bytes) -> bytes:
        return hmac.new(self._secret, message, _ALGORITHMS[self.algorithm]).digest()

    def create_access_token(self, user_id: str, role: str, expires_delta: Optional[int] = None) -> str:
        """Create a signed token for ``user_id`` with ``role``.

        The token is a string of the form ``header.payload.signature``,
        where each part is base64url encoded.  Clients send it in the
        ``Authorization`` header as ``Bearer <token>``.

        Parameters
        ----------
        user_id : str
            Identifier of the authenticated user.
        role : str
            Role of the user at the time of issuance.
        expires_delta : Optional[int]
            Lifetime in seconds.  Defaults to the service lifetime.

        Returns
        -------
        str
            A signed token.
        """
        issued_at = int(self._clock())
        lifetime = self.expires_seconds if expires_delta is None else expires_delta
        payload = {
            "user_id": user_id,
            "role": role,
            "iat": issued_at,
            "exp": issued_at + lifetime,
        }
        header = {"alg": self.algorithm, "typ": "JWT"}
        header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
        payload_b64 = _b64_url_encode(json.dumps(payload, separators=(",", ":")).encode("utf-8"))
        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        signature_b64 = _b64_url_encode(self._sign(signing_input))
        return f"{header_b64}.{payload_b64}.{signature_b64}"

    def decode_access_token(self, token: str) -> TokenClaims:
        """Verify a token and return its claims.

        Raises
        ------
        InvalidTokenError
            If the token is malformed, its signature does not match, it
            was signed with another algorithm, or it has expired.
        """
        parts = token.split(".")
        if len(parts) != 3:
            raise InvalidTokenError()
        header_b64, payload_b64, signature_b64 = parts
        try:
            header = json.loads(_b64_url_decode(header_b64).decode("utf-8"))
            actual_sig = _b64_url_decode(signature_b64)
        except (ValueError, UnicodeDecodeError):
            raise InvalidTokenError()
        if not isinstance(header, dict) or header.get("alg") != self.algorithm:
            raise InvalidTokenError()

        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        # Constant-time comparison to prevent timing attacks
        if not hmac.compare_digest(self._sign(signing_input), actual_sig):
            raise InvalidTokenError()

        try:
            data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
            claims = TokenClaims(
                user_id=str(data["user_id"]),
                role=str(data["role"]),
                issued_at=int(data["iat"]),
                expires_at=int(data["exp"]),
            )
        except (ValueError, UnicodeDecodeError, KeyError, TypeError):
            raise InvalidTokenError()
        if claims.expires_at <= int(self._clock()):
            raise InvalidTokenError("token expired")
        return claims


def hash_password(password: str, iterations: int = DEFAULT_PASSWORD_ITERATIONS) -> str:
    """Hash a password using PBKDF2-HMAC with SHA-256.

    A 16-byte random salt is generated for each password.  The result
    has the form ``pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>``.

    Parameters
    ----------
    password : str
        The plain text password to hash.
    iterations : int
        PBKDF2 work factor.

    Returns
    -------
    str
        The encoded hash.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{PASSWORD_HASH_SCHEME}${iterations}${salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a hash made by ``hash_password``.

    The digest is recomputed with the stored salt and iteration count
    and compared in constant time.  A malformed stored hash never
    verifies.
    """
    try:
        scheme, iterations, salt_hex, hash_hex = hashed_password.split("$")
        if scheme != PASSWORD_HASH_SCHEME:
            return False
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
        rounds = int(iterations)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, rounds)
    return hmac.compare_digest(dk, stored_hash)


# ---------------------------------------------------------------------------
# FastAPI dependencies
# ---------------------------------------------------------------------------

security = HTTPBearer(auto_error=False)


def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> TokenClaims:
    """Dependency that verifies the bearer token of the request.

    Missing, malformed or expired tokens yield HTTP 401.  On success the
    token claims (user id and role) are returned to the endpoint.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    user_service = request.app.state.container.user_service
    try:
        return user_service.validate_token(credentials.credentials)
    except InvalidTokenError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )


def require_roles(*roles: str) -> Callable[..., TokenClaims]:
    """Dependency factory enforcing that the caller holds one of ``roles``.

    Use it as ``Depends(require_roles("admin"))``.  Authenticated callers
    with any other role get ``ForbiddenError`` (HTTP 403).
    """

    def _role_dependency(current_user: TokenClaims = Depends(get_current_user)) -> TokenClaims:
        if current_user.role not in roles:
            raise ForbiddenError("Insufficient permissions")
        return current_user

    return _role_dependency
