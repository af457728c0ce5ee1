"""
Integration tests for repository implementations.
"""

import pytest
from asgiref.sync import sync_to_async
from django.utils import timezone

from businesses.domain.business import Business, BusinessSearchCriteria
from businesses.infrastructure.models import Business as BusinessModel
from licenses.infrastructure.models import License as LicenseModel


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
@pytest.mark.asyncio
class TestBusinessRepository:
    """Integration tests for BusinessRepository."""

    async def test_save_and_find(self, business_repository):
        """Test saving and finding a business."""
        saved = await business_repository.save(
            Business.create(name="Acme", customer_id=1, product_id=2)
        )

        assert saved.id is not None
        assert saved.created is not None
        assert saved.removed is None

        found = await business_repository.find_by_id(saved.id)
        assert found == saved

    async def test_save_existing_updates_row(self, business_repository):
        """Test that saving a persisted entity updates it in place."""
        saved = await business_repository.save(
            Business.create(name="Acme", customer_id=1, product_id=2)
        )

        resaved = await business_repository.save(saved.register_license("LIC1"))

        assert resaved.id == saved.id
        assert resaved.license_id == "LIC1"
        assert resaved.created == saved.created
        assert resaved.updated >= saved.updated
        assert await sync_to_async(BusinessModel.objects.count)() == 1

    async def test_find_not_found(self, business_repository):
        """Test finding non-existent business."""
        assert await business_repository.find_by_id(999999) is None
        assert await business_repository.find_live_by_id(999999) is None

    async def test_find_live_skips_removed(self, business_repository):
        """Test that soft-deleted rows are only visible to the raw lookup."""
        saved = await business_repository.save(
            Business.create(name="Acme", customer_id=1, product_id=2)
        )
        await business_repository.save(saved.mark_removed())

        assert await business_repository.find_live_by_id(saved.id) is None
        raw = await business_repository.find_by_id(saved.id)
        assert raw.is_removed is True

    async def test_search_orders_newest_first(self, business_repository):
        """Test listing order."""
        ids = []
        for name in ("first", "second", "third"):
            saved = await business_repository.save(
                Business.create(name=name, customer_id=1, product_id=2)
            )
            ids.append(saved.id)

        found = await business_repository.search(BusinessSearchCriteria(), 0, 10)

        assert [business.id for business in found] == list(reversed(ids))

    async def test_search_and_count_filters(self, business_repository):
        """Test name and availability filters."""
        await business_repository.save(
            Business.create(name="Acme Corp", customer_id=1, product_id=2)
        )
        await business_repository.save(
            Business.create(name="acme labs", customer_id=1, product_id=2, license_id="L1")
        )
        await business_repository.save(
            Business.create(name="Globex", customer_id=1, product_id=2)
        )

        by_name = BusinessSearchCriteria(name="acme")
        assert await business_repository.count(by_name) == 2

        available = BusinessSearchCriteria(available="1")
        names = {b.name for b in await business_repository.search(available, 0, 10)}
        assert names == {"Acme Corp", "Globex"}

        both = BusinessSearchCriteria(name="acme", available="yes")
        assert await business_repository.count(both) == 1

    async def test_search_window(self, business_repository):
        """Test offset and limit."""
        for i in range(5):
            await business_repository.save(
                Business.create(name=f"b{i}", customer_id=1, product_id=2)
            )

        window = await business_repository.search(BusinessSearchCriteria(), 2, 2)

        assert [b.name for b in window] == ["b2", "b1"]

    async def test_equal_created_falls_back_to_id_descending(self, business_repository):
        """Test that rows sharing a created timestamp page by id with no gaps or repeats."""
        ids = []
        for i in range(5):
            saved = await business_repository.save(
                Business.create(name=f"tie{i}", customer_id=1, product_id=2)
            )
            ids.append(saved.id)
        same = timezone.now().replace(microsecond=0)
        await sync_to_async(BusinessModel.objects.filter(id__in=ids).update)(created=same)
        expected = sorted(ids, reverse=True)

        everything = await business_repository.search(BusinessSearchCriteria(), 0, 10)
        paged = []
        for offset in range(0, 5, 2):
            window = await business_repository.search(BusinessSearchCriteria(), offset, 2)
            paged.extend(b.id for b in window)

        assert [b.id for b in everything] == expected
        assert paged == expected
        assert len(set(paged)) == len(ids)


@pytest.mark.django_db(transaction=True)
@pytest.mark.integration
@pytest.mark.asyncio
class TestReferenceDirectories:
    """Integration tests for the read-only directories."""

    async def test_customer_lookup(self, customer_directory, db_customer):
        """Test finding customers one at a time and in bulk."""
        found = await customer_directory.find_by_id(db_customer.id)
        assert found.name == "Acme Holdings"

        many = await customer_directory.find_many([db_customer.id, db_customer.id, 999999])
        assert list(many) == [db_customer.id]
        assert await customer_directory.find_by_id(999999) is None

    async def test_product_lookup(self, product_directory, db_product):
        """Test finding products one at a time and in bulk."""
        found = await product_directory.find_by_id(db_product.id)
        assert found.name == "Gateway Server"
        assert found.version == "2.4.1"

        assert await product_directory.find_many([]) == {}

    async def test_license_lookup_includes_removed(self, license_directory, db_license):
        """Test that removed licenses are still returned, flagged as removed."""
        found = await license_directory.find_by_id("LIC1")
        assert found.license_key == "AAAA-BBBB-CCCC-DDDD"
        assert found.is_removed is False

        await sync_to_async(LicenseModel.objects.filter(id="LIC1").update)(
            removed=timezone.now()
        )

        found = await license_directory.find_by_id("LIC1")
        assert found.is_removed is True
        assert await license_directory.find_by_id(None) is None

    async def test_license_lookup_by_business(self, license_directory, db_business, db_license):
        """Test finding the license issued to a business."""
        found = await license_directory.find_by_business_id(db_business.id)
        assert found.id == "LIC1"
        assert found.status == "active"

        assert await license_directory.find_by_business_id(999999) is None
        assert await license_directory.find_by_business_id(None) is None

    async def test_live_license_wins_over_removed(self, license_directory, db_business, db_license):
        """Test that a removed license is only returned when nothing live exists."""
        await sync_to_async(LicenseModel.objects.filter(id="LIC1").update)(
            removed=timezone.now()
        )
        await sync_to_async(LicenseModel.objects.create)(
            id="LIC2",
            business_id=db_business.id,
            license_key="EEEE-FFFF-GGGG-HHHH",
            status="active",
        )

        found = await license_directory.find_by_business_id(db_business.id)
        assert found.id == "LIC2"
        assert found.is_removed is False

        await sync_to_async(LicenseModel.objects.filter(id="LIC2").update)(
            removed=timezone.now()
        )

        found = await license_directory.find_by_business_id(db_business.id)
        assert found.is_removed is True
