"""User directory: internal users keyed by their external (Firebase) subject id."""
import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from finance_tracker.core.exceptions import DuplicateEmail
from finance_tracker.db import LoginMedium, User
from finance_tracker.utils import utcnow

logger = logging.getLogger(__name__)


class UserDirectory:
    """Finds or creates users. Email uniqueness is guarded only by the store's unique index."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, user_id: int) -> User | None:
        return self._session.get(User, user_id)

    def find_by_subject(self, subject_id: str) -> User | None:
        statement = select(User).where(User.firebase_user_id == subject_id)
        return self._session.exec(statement).first()

    def find_or_create(
        self,
        subject_id: str,
        email: str,
        name: str,
        provider: str | None,
    ) -> tuple[User, bool]:
        """Return the user for subject_id, creating it on first sight.

        An existing user only gets its updated_at touched.

        Returns:
            (user, created) where created is True for a new account.

        Raises:
            DuplicateEmail: Another subject id already owns this email.
        """
        user = self.find_by_subject(subject_id)
        if user is not None:
            user.updated_at = utcnow()
            self._session.add(user)
            self._session.commit()
            self._session.refresh(user)
            logger.info("User logged in: %s", user.email)
            return user, False

        user = User(
            firebase_user_id=subject_id,
            email=email.strip().lower(),
            name=name.strip(),
            login_medium=LoginMedium.from_provider(provider),
        )
        self._session.add(user)
        try:
            self._session.commit()
        except IntegrityError as exc:
            self._session.rollback()
            # Same subject raced itself: the winner's row is the answer.
            existing = self.find_by_subject(subject_id)
            if existing is not None:
                return existing, False
            raise DuplicateEmail() from exc
        self._session.refresh(user)
        logger.info("New user created: %s", user.email)
        return user, True
