class ValidationError(ValueError):
    """Raised when passages handed to a fee computation are invalid."""
