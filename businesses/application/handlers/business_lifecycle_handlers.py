"""
Business lifecycle handlers.

Handlers for create, update, remove and license registration commands.
"""
import logging

from businesses.application.commands.create_business import CreateBusinessCommand
from businesses.application.commands.register_license import RegisterLicenseCommand
from businesses.application.commands.remove_business import RemoveBusinessCommand
from businesses.application.commands.update_business import UpdateBusinessCommand
from businesses.domain.business import Business
from businesses.domain.events import (
    BusinessCreated,
    BusinessLicenseRegistered,
    BusinessRemoved,
    BusinessUpdated,
)
from businesses.domain.services import BusinessRecordManager
from businesses.ports.business_repository import BusinessRepository
from core import metrics
from core.domain.exceptions import BusinessException
from core.infrastructure.events import event_bus

logger = logging.getLogger(__name__)


def _record_lookup_failure(exc: BusinessException) -> None:
    metrics.business_lookup_failures_total.labels(error_code=exc.code).inc()
    logger.warning("Business lookup failed: %s - %s", exc.code, exc.message)


class CreateBusinessHandler:
    """Handler for CreateBusinessCommand."""

    def __init__(self, business_repository: BusinessRepository):
        """Initialize handler with repository."""
        self.business_repository = business_repository

    async def handle(self, command: CreateBusinessCommand) -> Business:
        """
        Handle create business command.

        Args:
            command: CreateBusinessCommand

        Returns:
            Persisted Business entity
        """
        business = Business.create(
            name=command.name,
            customer_id=command.customer_id,
            product_id=command.product_id,
            license_id=command.license_id,
        )
        saved = await self.business_repository.save(business)
        logger.info("Created business %s", saved.id)
        metrics.businesses_created_total.inc()

        await event_bus.publish(
            BusinessCreated(
                aggregate_id=str(saved.id),
                name=saved.name,
                customer_id=saved.customer_id,
                product_id=saved.product_id,
            )
        )
        return saved


class UpdateBusinessHandler:
    """Handler for UpdateBusinessCommand."""

    def __init__(self, business_repository: BusinessRepository):
        """Initialize handler with repository."""
        self.business_repository = business_repository

    async def handle(self, command: UpdateBusinessCommand) -> Business:
        """
        Handle update business command.

        Args:
            command: UpdateBusinessCommand

        Returns:
            Updated Business entity

        Raises:
            BusinessNotFoundError: If business not found or removed
            ValueError: If a change names a field that cannot be updated
        """
        try:
            business = await BusinessRecordManager.find_one(
                command.business_id, self.business_repository
            )
        except BusinessException as exc:
            _record_lookup_failure(exc)
            raise

        updated = await BusinessRecordManager.update_business(
            business, command.changes, self.business_repository
        )
        logger.info(
            "Updated business %s fields %s", updated.id, sorted(command.changes)
        )
        metrics.businesses_updated_total.inc()

        await event_bus.publish(
            BusinessUpdated(
                aggregate_id=str(updated.id),
                changed_fields=tuple(sorted(command.changes)),
            )
        )
        return updated


class RemoveBusinessHandler:
    """Handler for RemoveBusinessCommand."""

    def __init__(self, business_repository: BusinessRepository):
        """Initialize handler with repository."""
        self.business_repository = business_repository

    async def handle(self, command: RemoveBusinessCommand) -> None:
        """
        Handle remove business command.

        Args:
            command: RemoveBusinessCommand

        Raises:
            BusinessNotFoundError: If business not found or already removed
        """
        try:
            business = await BusinessRecordManager.find_one(
                command.business_id, self.business_repository
            )
        except BusinessException as exc:
            _record_lookup_failure(exc)
            raise

        removed = await BusinessRecordManager.remove_business(
            business, self.business_repository
        )
        logger.info(
            "Removed business %s (released license %s)",
            removed.id,
            business.license_id,
        )
        metrics.businesses_removed_total.inc()

        await event_bus.publish(
            BusinessRemoved(
                aggregate_id=str(removed.id),
                released_license_id=business.license_id,
            )
        )


class RegisterLicenseHandler:
    """Handler for RegisterLicenseCommand."""

    def __init__(self, business_repository: BusinessRepository):
        """Initialize handler with repository."""
        self.business_repository = business_repository

    async def handle(self, command: RegisterLicenseCommand) -> Business:
        """
        Handle register license command.

        Args:
            command: RegisterLicenseCommand

        Returns:
            Business entity with ``updated`` at whole-second precision

        Raises:
            BusinessRecordMissingError: If no business row exists
        """
        try:
            business = await BusinessRecordManager.find_raw(
                command.business_id, self.business_repository
            )
        except BusinessException as exc:
            _record_lookup_failure(exc)
            raise

        registered = await BusinessRecordManager.register_license(
            business, command.license_id, self.business_repository
        )
        logger.info(
            "Registered license %s on business %s", command.license_id, registered.id
        )
        metrics.business_licenses_registered_total.inc()

        await event_bus.publish(
            BusinessLicenseRegistered(
                aggregate_id=str(registered.id),
                license_id=command.license_id,
                previous_license_id=business.license_id,
            )
        )
        return registered
