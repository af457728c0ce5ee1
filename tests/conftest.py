"""
Pytest configuration and shared fixtures.
"""

from datetime import timedelta

import pytest
from django.utils import timezone

from businesses.infrastructure.models import Business as BusinessModel
from businesses.infrastructure.repositories.django_business_repository import (
    DjangoBusinessRepository,
)
from core.infrastructure.events import event_bus
from customers.infrastructure.models import Customer as CustomerModel
from customers.infrastructure.repositories.django_customer_directory import (
    DjangoCustomerDirectory,
)
from licenses.infrastructure.models import License as LicenseModel
from licenses.infrastructure.repositories.django_license_directory import (
    DjangoLicenseDirectory,
)
from products.infrastructure.models import Product as ProductModel
from products.infrastructure.repositories.django_product_directory import (
    DjangoProductDirectory,
)


@pytest.fixture(autouse=True)
def clean_event_bus():
    """Drop subscriptions made by a test."""
    yield
    event_bus.clear()


@pytest.fixture
def business_repository():
    """Fixture for BusinessRepository."""
    return DjangoBusinessRepository()


@pytest.fixture
def customer_directory():
    """Fixture for CustomerDirectory."""
    return DjangoCustomerDirectory()


@pytest.fixture
def product_directory():
    """Fixture for ProductDirectory."""
    return DjangoProductDirectory()


@pytest.fixture
def license_directory():
    """Fixture for LicenseDirectory."""
    return DjangoLicenseDirectory()


# Reference rows are written from the test thread while repositories read
# them from the sync_to_async worker thread, so they need committed data.


@pytest.fixture
def db_customer(transactional_db):
    """Fixture for a Customer saved in database."""
    return CustomerModel.objects.create(name="Acme Holdings")


@pytest.fixture
def db_product(transactional_db):
    """Fixture for a Product saved in database."""
    return ProductModel.objects.create(name="Gateway Server", version="2.4.1")


@pytest.fixture
def db_business(db_customer, db_product):
    """Fixture for a licensed Business saved in database."""
    return BusinessModel.objects.create(
        name="Acme",
        customer_id=db_customer.id,
        product_id=db_product.id,
        license_id="LIC1",
    )


@pytest.fixture
def db_license(db_business):
    """Fixture for an active License issued to db_business."""
    issued = timezone.now()
    return LicenseModel.objects.create(
        id="LIC1",
        business_id=db_business.id,
        license_key="AAAA-BBBB-CCCC-DDDD",
        status="active",
        issued=issued,
        expired=issued + timedelta(days=365),
    )
