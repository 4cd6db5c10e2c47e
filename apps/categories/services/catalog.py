"""
Default category catalog.

Every new account receives the same twelve categories (eight expense,
four income) in the scope chosen at registration.
"""

from typing import List, NamedTuple

from django.db import DEFAULT_DB_ALIAS

from apps.accounts.models import User
from apps.categories.models import Category, CategoryKind

from .scope import CategoryScope


class DefaultCategory(NamedTuple):
    name: str
    icon: str
    color: str
    kind: str


DEFAULT_CATEGORIES = (
    # Expenses
    DefaultCategory('Alimentación', 'utensils', '#10B981', CategoryKind.EXPENSE),
    DefaultCategory('Transporte', 'car', '#3B82F6', CategoryKind.EXPENSE),
    DefaultCategory('Vivienda', 'home', '#8B5CF6', CategoryKind.EXPENSE),
    DefaultCategory('Entretenimiento', 'film', '#F59E0B', CategoryKind.EXPENSE),
    DefaultCategory('Salud', 'heart', '#EF4444', CategoryKind.EXPENSE),
    DefaultCategory('Ropa', 'shirt', '#EC4899', CategoryKind.EXPENSE),
    DefaultCategory('Educación', 'book', '#06B6D4', CategoryKind.EXPENSE),
    DefaultCategory('Otros gastos', 'more-horizontal', '#6B7280', CategoryKind.EXPENSE),

    # Income
    DefaultCategory('Salario', 'briefcase', '#059669', CategoryKind.INCOME),
    DefaultCategory('Freelance', 'laptop', '#0D9488', CategoryKind.INCOME),
    DefaultCategory('Inversiones', 'trending-up', '#7C3AED', CategoryKind.INCOME),
    DefaultCategory('Otros ingresos', 'plus', '#16A34A', CategoryKind.INCOME),
)


def create_default_categories(
    *,
    owner: User,
    scope: CategoryScope,
    using: str = DEFAULT_DB_ALIAS
) -> List[Category]:
    """
    Materialize the default catalog for an account.

    Must run inside the caller's transaction: rows are inserted one by one,
    so a failure part-way through is only undone by the enclosing atomic
    block.

    Args:
        owner: Account owning the categories
        scope: Personal or shared scope the categories belong to
        using: Database alias to write to

    Returns:
        List of created Category instances, in catalog order
    """
    manager = Category.objects.db_manager(using)
    scope_fields = scope.model_fields()

    return [
        manager.create(
            owner=owner,
            name=entry.name,
            icon=entry.icon,
            color=entry.color,
            kind=entry.kind,
            is_default=True,
            **scope_fields
        )
        for entry in DEFAULT_CATEGORIES
    ]
