"""
Domain-specific exceptions for categories app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class CategoriesServiceError(Exception):
    """Base exception for all categories service errors."""
    pass


class CategoryNotFoundError(CategoriesServiceError):
    """Raised when a category does not exist or is outside the user's scope."""
    pass


class DuplicateCategoryError(CategoriesServiceError):
    """Raised when a category with the same name already exists in the scope."""
    pass


class DefaultCategoryProtectedError(CategoriesServiceError):
    """Raised when attempting to delete a default category."""
    pass
