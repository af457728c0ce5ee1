"""
Django implementation of CustomerDirectory port.
"""
from typing import Dict, Iterable, Optional

from asgiref.sync import sync_to_async

from customers.domain.customer import CustomerReference
from customers.infrastructure.models import Customer as CustomerModel
from customers.ports.customer_directory import CustomerDirectory


class DjangoCustomerDirectory(CustomerDirectory):
    """Django ORM implementation of CustomerDirectory."""

    def _to_domain(self, model: CustomerModel) -> CustomerReference:
        return CustomerReference(id=model.id, name=model.name)

    @sync_to_async
    def find_by_id(self, customer_id: int) -> Optional[CustomerReference]:
        if customer_id is None:
            return None
        try:
            model = CustomerModel.objects.get(id=customer_id)
            return self._to_domain(model)
        except CustomerModel.DoesNotExist:
            return None

    @sync_to_async
    def find_many(
        self, customer_ids: Iterable[int]
    ) -> Dict[int, CustomerReference]:
        ids = {customer_id for customer_id in customer_ids if customer_id is not None}
        if not ids:
            return {}
        models = CustomerModel.objects.filter(id__in=ids)
        return {model.id: self._to_domain(model) for model in models}
