"""
Django implementation of BusinessRepository port.

This adapter converts between domain entities and Django ORM models.
"""
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db.models import QuerySet

from businesses.domain.business import Business, BusinessSearchCriteria
from businesses.infrastructure.models import Business as BusinessModel
from businesses.ports.business_repository import BusinessRepository


class DjangoBusinessRepository(BusinessRepository):
    """
    Django ORM implementation of BusinessRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: BusinessModel) -> Business:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Business model

        Returns:
            Business domain entity
        """
        return Business(
            id=model.id,
            name=model.name,
            customer_id=model.customer_id,
            product_id=model.product_id,
            license_id=model.license_id,
            created=model.created,
            updated=model.updated,
            removed=model.removed,
        )

    def _to_model(self, business: Business) -> BusinessModel:
        """
        Convert domain entity to Django model.

        Args:
            business: Business domain entity

        Returns:
            Django Business model, unsaved
        """
        if business.id is None:
            model = BusinessModel()
        else:
            model = BusinessModel.objects.get(id=business.id)
        model.name = business.name
        model.customer_id = business.customer_id
        model.product_id = business.product_id
        model.license_id = business.license_id
        model.removed = business.removed
        return model

    def _live(self, criteria: BusinessSearchCriteria) -> QuerySet:
        qs = BusinessModel.objects.filter(removed__isnull=True)
        if criteria.name:
            qs = qs.filter(name__icontains=criteria.name)
        if criteria.only_available:
            qs = qs.filter(license_id__isnull=True)
        return qs

    @sync_to_async
    def save(self, business: Business) -> Business:
        """
        Save a business entity.

        Args:
            business: Business entity to save

        Returns:
            Saved business entity
        """
        model = self._to_model(business)
        model.save()
        return self._to_domain(model)

    @sync_to_async
    def find_by_id(self, business_id: int) -> Optional[Business]:
        """
        Find a business by ID, including soft-deleted rows.

        Args:
            business_id: Business id

        Returns:
            Business entity or None if not found
        """
        try:
            model = BusinessModel.objects.get(id=business_id)
            return self._to_domain(model)
        except BusinessModel.DoesNotExist:
            return None

    @sync_to_async
    def find_live_by_id(self, business_id: int) -> Optional[Business]:
        """
        Find a business by ID, excluding soft-deleted rows.

        Args:
            business_id: Business id

        Returns:
            Business entity or None if not found
        """
        try:
            model = BusinessModel.objects.get(id=business_id, removed__isnull=True)
            return self._to_domain(model)
        except BusinessModel.DoesNotExist:
            return None

    @sync_to_async
    def search(
        self, criteria: BusinessSearchCriteria, offset: int, limit: int
    ) -> List[Business]:
        """
        List live businesses matching the criteria, newest first.

        Args:
            criteria: Listing filters
            offset: Rows to skip
            limit: Maximum rows to return

        Returns:
            List of Business entities
        """
        qs = self._live(criteria).order_by("-created", "-id")[offset : offset + limit]
        return [self._to_domain(model) for model in qs]

    @sync_to_async
    def count(self, criteria: BusinessSearchCriteria) -> int:
        """
        Count live businesses matching the criteria.

        Args:
            criteria: Listing filters

        Returns:
            Number of matching rows
        """
        return self._live(criteria).count()
