class AuthException(Exception):
    """Base exception for authentication errors"""
    pass

class InvalidCredentialsException(AuthException):
    """Raised when login credentials are invalid"""
    pass

class NotLoggedInException(AuthException):
    """Raised when an operation needs an active user and the session has none"""
    pass
