"""Maps persistence exceptions onto the domain error taxonomy."""
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from finance_tracker.core.exceptions import (DuplicateKeyError,
                                             FinanceTrackerError)

# Exceptions from the session we translate; everything else propagates (bugs, BaseException).
PERSISTENCE_EXCEPTIONS: tuple[type[Exception], ...] = (
    IntegrityError,
    SQLAlchemyError,
)


@dataclass(frozen=True)
class ErrorMapper:
    """Maps store exceptions to domain errors for one resource.

    Inject into services so messages name the resource (e.g. "Category",
    "Expense") and the action that failed.
    """

    resource_name: str = "Record"

    def to_domain(self, exc: Exception, action: str = "save") -> FinanceTrackerError:
        """Translate a store exception into a FinanceTrackerError.

        Args:
            exc: Exception raised while talking to the database.
            action: Verb for the generic failure message (e.g. "create", "fetch").

        Returns:
            The domain error to raise in its place.
        """
        if isinstance(exc, FinanceTrackerError):
            return exc
        if isinstance(exc, IntegrityError):
            return DuplicateKeyError(f"{self.resource_name} with this name already exists")
        return FinanceTrackerError(f"Failed to {action} {self.resource_name.lower()}")

    def raise_domain(self, exc: Exception, action: str = "save") -> None:
        """Map a store exception and raise it. Never returns."""
        raise self.to_domain(exc, action) from exc
