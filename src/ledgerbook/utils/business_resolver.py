"""Utility for resolving business names to IDs."""

from typing import Optional
from ledgerbook.domain.business import BusinessService
from ledgerbook.domain.errors import NotFoundError

ALL_BUSINESSES = "all"


def resolve_business(business_service: BusinessService, business: Optional[str | int]) -> Optional[int]:
    """Resolve a business name or ID to a business ID.

    Args:
        business_service: BusinessService instance
        business: Business name, ID, or "all"/None for no filter

    Returns:
        Business ID, or None when every business is selected

    Raises:
        NotFoundError: If business is not found
    """
    if business is None:
        return None
    if isinstance(business, str) and business.strip().lower() == ALL_BUSINESSES:
        return None

    try:
        business_id = int(business)
    except (ValueError, TypeError):
        business_id = None

    if business_id is not None:
        if business_service.get_business(business_id) is None:
            raise NotFoundError(f"Business ID {business_id} not found")
        return business_id

    for candidate in business_service.list_businesses():
        if candidate.name == business:
            return candidate.id

    raise NotFoundError(f"Business '{business}' not found")
