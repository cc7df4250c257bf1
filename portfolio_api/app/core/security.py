"""
Bearer-token verification for mutating requests.

Tokens are compact JSON Web Signatures (``header.payload.signature``,
each part base64url encoded without padding) signed with HMAC-SHA256.
They are issued by an external identity provider that shares the
signing secret with this service; the API only verifies them.  A
token is accepted when:

* it has exactly three segments that decode to JSON objects;
* its header declares ``"alg": "HS256"``;
* the signature over ``header.payload`` matches the shared secret;
* ``exp`` (if present) has not passed and ``nbf`` (if present) has
  been reached, both with ``settings.jwt_leeway_seconds`` of skew.

Read endpoints never depend on this module.  Write endpoints declare
``Depends(get_current_user)`` so that a missing or invalid token stops
the request with 401 before any service code runs.  No claim is
inspected for ownership: any valid token may modify any profile.

``create_access_token`` mints tokens with the same secret.  It is used
by ``create_token.py`` and the test-suite; production tokens come from
the identity provider.
"""

import base64
import hashlib
import hmac
import json
import logging
import time
from typing import Any, Dict, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .config import settings

logger = logging.getLogger(__name__)


def _b64_url_encode(data: bytes) -> str:
    """Base64-url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64-url encoded string, adding padding if necessary."""
    padding = "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _decode_segment(segment: str) -> Dict[str, Any]:
    value = json.loads(_b64_url_decode(segment).decode("utf-8"))
    if not isinstance(value, dict):
        raise ValueError("token segment is not a JSON object")
    return value


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC-SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed HS256 token carrying ``data``.

    The claims are extended with ``iat`` and ``exp`` (UNIX timestamps).
    ``expires_delta`` is the lifetime in seconds and defaults to
    ``settings.access_token_expire_minutes * 60``.  Raises
    ``RuntimeError`` when no signing secret is configured.
    """
    if not settings.jwt_secret:
        raise RuntimeError("JWT_SECRET is not configured")
    now = int(time.time())
    to_encode = dict(data)
    to_encode.setdefault("iat", now)
    to_encode["exp"] = now + (expires_delta or settings.access_token_expire_minutes * 60)
    header = {"alg": settings.jwt_algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(",", ":")).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(",", ":")).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.jwt_secret))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify ``token`` and return its claims, or ``None`` if it is invalid.

    Parameters
    ----------
    token : str
        Compact token string (``header.payload.signature``).

    Returns
    -------
    Optional[dict]
        The decoded payload if every check passes, else ``None``.
    """
    if not settings.jwt_secret:
        logger.debug("Token rejected: no signing secret configured")
        return None
    try:
        parts = token.split(".")
        if len(parts) != 3:
            return None
        header_b64, payload_b64, signature_b64 = parts
        header = _decode_segment(header_b64)
        if header.get("alg") != settings.jwt_algorithm:
            logger.debug("Token rejected: unsupported algorithm %r", header.get("alg"))
            return None
        signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
        expected_sig = _sign(signing_input, settings.jwt_secret)
        if not hmac.compare_digest(expected_sig, _b64_url_decode(signature_b64)):
            logger.debug("Token rejected: signature mismatch")
            return None
        payload = _decode_segment(payload_b64)
        now = time.time()
        leeway = settings.jwt_leeway_seconds
        if payload.get("exp") is not None and float(payload["exp"]) + leeway < now:
            logger.debug("Token rejected: expired")
            return None
        if payload.get("nbf") is not None and float(payload["nbf"]) - leeway > now:
            logger.debug("Token rejected: not yet valid")
            return None
        return payload
    except (ValueError, TypeError):
        # Malformed base64, JSON or numeric claims.
        return None


security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Dict[str, Any]:
    """Dependency that admits only requests carrying a valid bearer token.

    Raises HTTP 401 when the ``Authorization`` header is missing, is not
    a bearer credential, or holds a token that fails verification.
    Returns the token claims on success.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    payload = decode_access_token(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return payload
