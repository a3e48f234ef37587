# =============================================================================
# tests/test_auth.py - Auth Gatekeeping Tests
# =============================================================================
# Tests authorize() directly, without HTTP:
# - Missing credentials -> MissingCredentialError
# - Any token failure   -> InvalidTokenError
# - Valid token         -> AuthUser with the issued claims
# =============================================================================

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from app.auth import AuthUser, authorize
from app.exceptions import InvalidTokenError, MissingCredentialError


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestAuthorize:
    """Tests for authorize()."""

    def test_missing_credentials(self, token_service):
        with pytest.raises(MissingCredentialError) as exc_info:
            authorize(None, token_service)

        assert exc_info.value.status_code == 403

    def test_empty_token(self, token_service):
        with pytest.raises(MissingCredentialError):
            authorize(_bearer(""), token_service)

    def test_valid_token(self, token_service, clock):
        token = token_service.issue("user-1", "jane@example.com")

        user = authorize(_bearer(token), token_service)

        assert isinstance(user, AuthUser)
        assert user.id == "user-1"
        assert user.email == "jane@example.com"
        assert user.issued_at == clock.now

    def test_expired_token_collapses_to_invalid(self, token_service, clock):
        token = token_service.issue("user-1", "jane@example.com")
        clock.advance(hours=2)

        with pytest.raises(InvalidTokenError) as exc_info:
            authorize(_bearer(token), token_service)

        assert exc_info.value.status_code == 403

    def test_malformed_token_collapses_to_invalid(self, token_service):
        with pytest.raises(InvalidTokenError):
            authorize(_bearer("abc.def.ghi"), token_service)

    def test_tampered_token_collapses_to_invalid(self, token_service):
        token = token_service.issue("user-1", "jane@example.com")
        signing_input, signature = token.rsplit(".", 1)
        first = "A" if signature[0] != "A" else "B"
        tampered = f"{signing_input}.{first}{signature[1:]}"

        with pytest.raises(InvalidTokenError):
            authorize(_bearer(tampered), token_service)

    def test_error_body_is_generic(self, token_service):
        with pytest.raises(InvalidTokenError) as exc_info:
            authorize(_bearer("abc.def.ghi"), token_service)

        body = exc_info.value.to_dict()
        assert body["error"] == "Invalid or expired access token"
        assert body["code"] == "INVALID_TOKEN"
