"""Use cases creating and deleting a user's own categories.

Every mutation is followed by a fresh category listing, the same
invalidate-and-refetch contract the expense use cases follow.
"""

from dataclasses import dataclass

from src.application.ports.expenses_repository import (
    ExpensesRepositoryPort,
    UserContext,
)
from src.domain.errors import ValidationError
from src.domain.models import CategorySnapshot
from src.domain.services.validation import validate_new_category
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class AddCategoryResult:
    """Identifier of the inserted category and the refreshed listing."""

    category_id: str
    categories: tuple[CategorySnapshot, ...]


@dataclass(frozen=True)
class DeleteCategoryResult:
    """Outcome of a delete and the refreshed listing."""

    deleted: bool
    categories: tuple[CategorySnapshot, ...]


class AddCategoryUseCase:
    """Validate and insert a category, then list categories again."""

    def __init__(
        self,
        expenses_repository: ExpensesRepositoryPort,
        logger=None,
    ) -> None:
        self._expenses_repository = expenses_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user: UserContext,
        name: str,
        color: str,
        icon: str | None = None,
    ) -> AddCategoryResult:
        """Create a category for ``user``.

        Args:
            user: Owner of the new category.
            name: Display name, 2 to 50 characters.
            color: Hex color in ``#RRGGBB`` form.
            icon: Optional glyph shown next to the name.

        Returns:
            AddCategoryResult: New identifier and the user's categories.

        Raises:
            ValidationError: If the input is malformed or the user already
                has a category with that name.
        """
        validate_new_category(name, color, icon)
        existing = {
            category.name.casefold()
            for category in self._expenses_repository.list_categories(user)
        }
        if name.strip().casefold() in existing:
            raise ValidationError(
                None,
                "name",
                f"category {name.strip()!r} already exists",
                kind="category",
            )
        category_id = self._expenses_repository.add_category(
            user,
            name,
            color,
            icon,
        )
        self._logger.info(
            f"Added category id={category_id} name={name.strip()} "
            f"for user={user.user_id}"
        )
        return AddCategoryResult(
            category_id=category_id,
            categories=tuple(self._expenses_repository.list_categories(user)),
        )


class DeleteCategoryUseCase:
    """Delete a user-defined category, then list categories again."""

    def __init__(
        self,
        expenses_repository: ExpensesRepositoryPort,
        logger=None,
    ) -> None:
        self._expenses_repository = expenses_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user: UserContext,
        category_id: str,
    ) -> DeleteCategoryResult:
        """Delete ``category_id`` unless it is missing or a default."""
        deleted = self._expenses_repository.delete_category(user, category_id)
        if not deleted:
            self._logger.warning(
                f"Category id={category_id} not deleted for "
                f"user={user.user_id}: missing or default"
            )
        return DeleteCategoryResult(
            deleted=deleted,
            categories=tuple(self._expenses_repository.list_categories(user)),
        )


__all__ = [
    "AddCategoryResult",
    "AddCategoryUseCase",
    "DeleteCategoryResult",
    "DeleteCategoryUseCase",
]
