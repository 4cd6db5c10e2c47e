"""
Categories app services layer.

Services contain business logic and orchestrate operations across models.
All state-changing operations use transactions.
"""

from .exceptions import (
    CategoriesServiceError,
    CategoryNotFoundError,
    DuplicateCategoryError,
    DefaultCategoryProtectedError,
)

from .scope import CategoryScope

from .catalog import (
    DEFAULT_CATEGORIES,
    create_default_categories,
)

from .category_management import (
    get_categories_for_user,
    create_category,
    update_category,
    delete_category,
    move_categories_to_couple,
)


__all__ = [
    # Exceptions
    'CategoriesServiceError',
    'CategoryNotFoundError',
    'DuplicateCategoryError',
    'DefaultCategoryProtectedError',

    # Scope
    'CategoryScope',

    # Catalog
    'DEFAULT_CATEGORIES',
    'create_default_categories',

    # Category Management
    'get_categories_for_user',
    'create_category',
    'update_category',
    'delete_category',
    'move_categories_to_couple',
]
