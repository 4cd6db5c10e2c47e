"""
Category ownership scope.

A category belongs either to a single account (personal scope) or to the
couple that account is part of (shared scope). The two cases are kept
apart explicitly instead of reusing one identifier for both.
"""

from dataclasses import dataclass
from typing import Optional

from apps.categories.models import ScopeKind


@dataclass(frozen=True)
class CategoryScope:
    kind: str
    user: Optional[object] = None
    couple: Optional[object] = None

    @classmethod
    def personal(cls, user) -> 'CategoryScope':
        return cls(kind=ScopeKind.PERSONAL, user=user)

    @classmethod
    def shared(cls, couple) -> 'CategoryScope':
        return cls(kind=ScopeKind.SHARED, couple=couple)

    @classmethod
    def for_user(cls, user) -> 'CategoryScope':
        """Scope the user currently sees: their couple if any, else themselves."""
        if user.couple_id:
            return cls.shared(user.couple)
        return cls.personal(user)

    @property
    def is_shared(self) -> bool:
        return self.kind == ScopeKind.SHARED

    @property
    def scope_id(self):
        if self.is_shared:
            return self.couple.pk
        return self.user.pk

    def model_fields(self) -> dict:
        """Field values stored on a Category created in this scope."""
        return {
            'scope': self.kind,
            'couple': self.couple if self.is_shared else None,
        }

    def filter_kwargs(self) -> dict:
        if self.is_shared:
            return {'scope': ScopeKind.SHARED, 'couple': self.couple}
        return {'scope': ScopeKind.PERSONAL, 'owner': self.user}

    def apply(self, queryset):
        return queryset.filter(**self.filter_kwargs())
