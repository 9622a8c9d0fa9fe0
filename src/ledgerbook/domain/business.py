"""Business domain service."""

from typing import Optional
from ledgerbook.database.base import Database
from ledgerbook.domain.entities import Business
from ledgerbook.domain.errors import ConflictError, ValidationError


class BusinessService:
    """Service for managing businesses."""

    def __init__(self, db: Database):
        """Initialize business service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_business(self, name: str, tax_id: Optional[str] = None) -> int:
        """Create a new business.

        Args:
            name: Business name
            tax_id: Optional tax identification number

        Returns:
            Business ID

        Raises:
            ValidationError: If name is empty
            ConflictError: If business name already exists
        """
        name = name.strip()
        if not name:
            raise ValidationError("Business name must not be empty")

        for business in self.db.list_businesses():
            if business.name == name:
                raise ConflictError(f"Business with name '{name}' already exists")

        return self.db.create_business(name=name, tax_id=tax_id)

    def get_business(self, business_id: int) -> Optional[Business]:
        """Get business by ID."""
        return self.db.get_business(business_id)

    def list_businesses(self) -> list[Business]:
        """List all businesses."""
        return self.db.list_businesses()
