"""
Business logic for users.

Besides CRUD the ``UserService`` keeps e‑mail addresses unique, stamps
``created_at`` / ``updated_at`` and answers the reporting queries the
user directory needs: name search, age ranges, status filters and
aggregate statistics.

Uniqueness checks run under the repository's write lock together with
the save they guard, so two concurrent registrations with the same
address cannot both succeed.
"""

import logging
from collections import Counter
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from catalog_api.app.core.errors import CatalogError, ErrorKind
from catalog_api.app.repositories.memory import InMemoryRepository
from catalog_api.app.schemas.user import ACTIVE, User, UserStatistics

from .base import CrudService

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _normalise_email(email: str) -> str:
    return email.strip().lower()


class UserService(CrudService[User]):
    """Service for the user directory."""

    def __init__(self, repository: InMemoryRepository[User]) -> None:
        super().__init__(repository)

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------
    def create(self, entity: User) -> User:
        now = _now()
        return super().create(entity.model_copy(update={"created_at": now, "updated_at": now}))

    def _before_create(self, entity: User) -> None:
        self._ensure_email_free(entity.email)

    def _before_update(self, current: User, changed: User) -> None:
        if _normalise_email(current.email) != _normalise_email(changed.email):
            self._ensure_email_free(changed.email, exclude_id=current.id)
        changed.created_at = current.created_at
        changed.updated_at = _now()

    def _ensure_email_free(self, email: str, exclude_id: Optional[int] = None) -> None:
        if self.exists_by_email(email, exclude_id=exclude_id):
            logger.warning("E-mail %s is already registered", email)
            raise CatalogError(
                ErrorKind.CONFLICT,
                f"A user with e-mail {email} already exists",
                entity=self.entity_name,
            )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def exists_by_email(self, email: str, exclude_id: Optional[int] = None) -> bool:
        wanted = _normalise_email(email)
        matches = self.repository.find_where(
            lambda u: _normalise_email(u.email) == wanted and u.id != exclude_id
        )
        return bool(matches)

    def search_by_name(self, fragment: str) -> List[User]:
        """Case‑insensitive substring search on the user's name."""
        if fragment is None or not fragment.strip():
            raise CatalogError.invalid("Search text must not be empty", entity=self.entity_name)
        needle = fragment.strip().lower()
        return self.repository.find_where(lambda u: needle in u.name.lower())

    def list_by_age_range(self, min_age: int, max_age: int) -> List[User]:
        if min_age < 0 or max_age < 0 or min_age > max_age:
            raise CatalogError.invalid(
                f"Invalid age range {min_age}..{max_age}", entity=self.entity_name
            )
        return self.repository.find_where(lambda u: min_age <= u.age <= max_age)

    def list_by_status(self, status: str) -> List[User]:
        return self.repository.find_where(lambda u: u.status == status)

    def count_by_status(self) -> Dict[str, int]:
        return dict(Counter(u.status for u in self.repository.find_all()))

    def statistics(self) -> UserStatistics:
        users = self.repository.find_all()
        if not users:
            return UserStatistics()
        ages = [u.age for u in users]
        today = _now().date()
        return UserStatistics(
            total_users=len(users),
            active_users=sum(1 for u in users if u.status == ACTIVE),
            average_age=sum(ages) / len(ages),
            min_age=min(ages),
            max_age=max(ages),
            users_created_today=sum(
                1 for u in users if u.created_at is not None and u.created_at.date() == today
            ),
        )

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def update_status(self, user_id: int, status: str) -> User:
        if status is None or not status.strip():
            raise CatalogError.invalid("Status must not be empty", entity=self.entity_name, entity_id=user_id)
        user = self._mutate(user_id, lambda u: u.model_copy(update={"status": status.strip()}))
        logger.info("User %s status set to %s", user_id, user.status)
        return user

    def create_bulk(self, users: Sequence[User]) -> List[User]:
        """Create several users, all or nothing.

        Every user is validated, and every e‑mail checked against the
        store and against the rest of the batch, before the first one
        is saved.
        """
        if not users:
            raise CatalogError.invalid("At least one user is required", entity=self.entity_name)
        now = _now()
        candidates = [u.model_copy(update={"id": None, "created_at": now, "updated_at": now}) for u in users]
        for candidate in candidates:
            self._validate(candidate)
        seen = Counter(_normalise_email(c.email) for c in candidates)
        duplicates = sorted(email for email, n in seen.items() if n > 1)
        if duplicates:
            raise CatalogError(
                ErrorKind.CONFLICT,
                f"Duplicate e-mail in batch: {', '.join(duplicates)}",
                entity=self.entity_name,
            )
        with self.repository.exclusive():
            for candidate in candidates:
                self._ensure_email_free(candidate.email)
            saved = [self.repository.save(candidate) for candidate in candidates]
        logger.info("Created %s users in bulk", len(saved))
        return saved
