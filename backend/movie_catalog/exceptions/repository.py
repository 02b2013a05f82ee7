class RepositoryException(Exception):
    """Base exception for all repository-related errors."""
    pass

class EntityNotFoundException(RepositoryException):
    """Raised when updating an entity whose id has no stored row."""
    pass

class DuplicateEntityException(RepositoryException):
    """Raised when a save would break a uniqueness rule (e.g. two users with one username)."""
    pass

class InvalidEntityDataException(RepositoryException):
    """Raised when an entity misses required data or cannot be mapped to a row."""
    pass

class RepositoryOperationException(RepositoryException):
    """Raised when a unit of work fails for any reason not covered by other exceptions.

    The unit of work is rolled back before this propagates.
    """
    pass
