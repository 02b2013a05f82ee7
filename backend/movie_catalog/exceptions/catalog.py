class CatalogServiceException(Exception):
    """Base exception for catalog service errors."""
    pass

class ResourceNotFoundException(CatalogServiceException):
    """Raised when a requested movie or copy is not found."""
    pass

class InvalidRequestException(CatalogServiceException):
    """Raised when form data is incomplete or invalid (blank fields, bad year, unknown movie)."""
    pass
