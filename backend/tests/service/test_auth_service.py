import pytest
from unittest.mock import Mock, patch

from movie_catalog.domain.models import User
from movie_catalog.service.auth_service import AuthService, get_password_hash, verify_password
from movie_catalog.service.session_service import SessionService
from movie_catalog.exceptions.auth import InvalidCredentialsException


@pytest.fixture
def mock_user_repo():
    """Create a mock user repository."""
    return Mock()


@pytest.fixture
def auth_service(mock_user_repo):
    """Create an auth service with mock repository."""
    return AuthService(mock_user_repo)


@pytest.fixture
def test_user():
    """Create a test user with a stored plain password."""
    return User(id=1, username="admin", password="admin", is_admin=True)


def test_validate_credentials_success(auth_service, mock_user_repo, test_user):
    """Test that matching credentials return the stored user."""
    mock_user_repo.find_by_username.return_value = test_user

    result = auth_service.validate_credentials("admin", "admin")

    assert result is test_user
    mock_user_repo.find_by_username.assert_called_once_with("admin")


def test_validate_credentials_unknown_user(auth_service, mock_user_repo):
    """Test that an unknown username yields no user."""
    mock_user_repo.find_by_username.return_value = None

    assert auth_service.validate_credentials("nobody", "admin") is None


def test_validate_credentials_wrong_password(auth_service, mock_user_repo, test_user):
    """Test that a wrong password yields no user."""
    mock_user_repo.find_by_username.return_value = test_user

    assert auth_service.validate_credentials("admin", "wrong") is None


@pytest.mark.parametrize("candidate", ["Admin", "ADMIN", "admin ", " admin", ""])
def test_validate_credentials_no_normalization(auth_service, mock_user_repo, test_user, candidate):
    """Test that the comparison is exact and case-sensitive."""
    mock_user_repo.find_by_username.return_value = test_user

    assert auth_service.validate_credentials("admin", candidate) is None


def test_validate_credentials_hashed_password(auth_service, mock_user_repo):
    """Test that a passlib hash is verified instead of compared as text."""
    hashed_user = User(id=2, username="carol", password=get_password_hash("s3cret"))
    mock_user_repo.find_by_username.return_value = hashed_user

    assert auth_service.validate_credentials("carol", "s3cret") is hashed_user
    assert auth_service.validate_credentials("carol", "wrong") is None


def test_verify_password_plain_and_hashed():
    assert verify_password("admin", "admin") is True
    assert verify_password("admin", "admin2") is False
    assert verify_password("contraseña", "contraseña") is True
    assert verify_password("pw", get_password_hash("pw")) is True


def test_verify_password_malformed_hash_compared_as_text():
    assert verify_password("x", "$pbkdf2-sha256$garbage") is False
    assert verify_password("$pbkdf2-sha256$garbage", "$pbkdf2-sha256$garbage") is True


def test_login_fills_session(auth_service, mock_user_repo, test_user):
    """Test that login stores the user and its id in the session."""
    mock_user_repo.find_by_username.return_value = test_user
    session = SessionService()

    user = auth_service.login(session, "admin", "admin")

    assert user is test_user
    assert session.is_logged_in() is True
    assert session.get_active() is test_user
    assert session.get_object("id") == 1


def test_login_invalid_credentials(auth_service, mock_user_repo, test_user):
    """Test that a failed login raises and leaves the session empty."""
    mock_user_repo.find_by_username.return_value = test_user
    session = SessionService()

    with pytest.raises(InvalidCredentialsException, match="Invalid username or password"):
        auth_service.login(session, "admin", "nope")

    assert session.is_logged_in() is False
    assert session.get_object("id") is None


def test_login_uses_verify_password(auth_service, mock_user_repo, test_user):
    """Test that the comparison goes through verify_password only."""
    mock_user_repo.find_by_username.return_value = test_user

    with patch("movie_catalog.service.auth_service.verify_password", return_value=True) as verify:
        assert auth_service.validate_credentials("admin", "anything") is test_user
        verify.assert_called_once_with("anything", "admin")
