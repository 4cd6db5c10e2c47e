"""
Category management service.

Handles category CRUD within the user's current scope.
"""

from typing import Optional
from uuid import UUID

from django.db import transaction
from django.db.models import QuerySet

from apps.accounts.models import User
from apps.categories.models import Category, ScopeKind

from .exceptions import (
    CategoryNotFoundError,
    DuplicateCategoryError,
    DefaultCategoryProtectedError,
)
from .scope import CategoryScope


def get_categories_for_user(*, user: User, kind: Optional[str] = None) -> QuerySet:
    """
    List the categories visible to a user, defaults first, then by name.

    Args:
        user: User whose scope is listed
        kind: Optional filter (income or expense)

    Returns:
        QuerySet of Category instances
    """
    queryset = CategoryScope.for_user(user).apply(Category.objects.all())

    if kind:
        queryset = queryset.filter(kind=kind)

    return queryset.order_by('-is_default', 'name')


def _get_scoped_category(*, category_id: UUID, user: User, lock: bool = False) -> Category:
    queryset = CategoryScope.for_user(user).apply(Category.objects.all())
    if lock:
        queryset = queryset.select_for_update()

    try:
        return queryset.get(id=category_id)
    except Category.DoesNotExist:
        raise CategoryNotFoundError(f"Category with ID {category_id} not found")


def _ensure_name_available(scope: CategoryScope, name: str, exclude_id: Optional[UUID] = None) -> None:
    queryset = scope.apply(Category.objects.filter(name__iexact=name))
    if exclude_id is not None:
        queryset = queryset.exclude(id=exclude_id)

    if queryset.exists():
        raise DuplicateCategoryError(f"A category named '{name}' already exists")


@transaction.atomic
def create_category(
    *,
    user: User,
    name: str,
    icon: str,
    color: str,
    kind: str
) -> Category:
    """
    Create a custom category in the user's scope.

    Args:
        user: Creating user (becomes the owner)
        name: Category name, unique per scope ignoring case
        icon: Icon tag
        color: Hex color (#RRGGBB)
        kind: income or expense

    Returns:
        Created Category instance

    Raises:
        DuplicateCategoryError: If the name is already used in the scope
    """
    scope = CategoryScope.for_user(user)
    name = name.strip()
    _ensure_name_available(scope, name)

    return Category.objects.create(
        owner=user,
        name=name,
        icon=icon,
        color=color,
        kind=kind,
        is_default=False,
        **scope.model_fields()
    )


@transaction.atomic
def update_category(
    *,
    category_id: UUID,
    user: User,
    name: Optional[str] = None,
    icon: Optional[str] = None,
    color: Optional[str] = None,
    kind: Optional[str] = None
) -> Category:
    """
    Update a category visible to the user.

    Raises:
        CategoryNotFoundError: If the category is outside the user's scope
        DuplicateCategoryError: If the new name is already used in the scope
    """
    category = _get_scoped_category(category_id=category_id, user=user, lock=True)
    update_fields = []

    if name is not None:
        name = name.strip()
        _ensure_name_available(CategoryScope.for_user(user), name, exclude_id=category.id)
        category.name = name
        update_fields.append('name')

    if icon is not None:
        category.icon = icon
        update_fields.append('icon')

    if color is not None:
        category.color = color
        update_fields.append('color')

    if kind is not None:
        category.kind = kind
        update_fields.append('kind')

    if update_fields:
        category.save(update_fields=update_fields)

    return category


@transaction.atomic
def delete_category(*, category_id: UUID, user: User) -> None:
    """
    Delete a custom category.

    Raises:
        CategoryNotFoundError: If the category is outside the user's scope
        DefaultCategoryProtectedError: If the category is a default one
    """
    category = _get_scoped_category(category_id=category_id, user=user, lock=True)

    if category.is_default:
        raise DefaultCategoryProtectedError("Default categories cannot be deleted")

    category.delete()


def move_categories_to_couple(*, user: User, couple, include_defaults: bool = True) -> int:
    """
    Move the user's categories into a couple's shared scope.

    Categories whose name already exists in the couple (ignoring case) are
    left where they are. Callers run this inside their own transaction.

    Args:
        user: Owner of the categories to move
        couple: Target CoupleProfile
        include_defaults: Whether default categories move too

    Returns:
        Number of categories moved
    """
    target = CategoryScope.shared(couple)
    taken = {
        name.lower()
        for name in target.apply(Category.objects.all()).values_list('name', flat=True)
    }

    candidates = Category.objects.filter(owner=user).exclude(couple=couple)
    if not include_defaults:
        candidates = candidates.filter(is_default=False)

    moved = 0
    for category in candidates.select_for_update():
        if category.name.lower() in taken:
            continue
        category.scope = ScopeKind.SHARED
        category.couple = couple
        category.save(update_fields=['scope', 'couple'])
        taken.add(category.name.lower())
        moved += 1

    return moved
