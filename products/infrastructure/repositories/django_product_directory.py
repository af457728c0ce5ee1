"""
Django implementation of ProductDirectory port.
"""
from typing import Dict, Iterable, Optional

from asgiref.sync import sync_to_async

from products.domain.product import ProductReference
from products.infrastructure.models import Product as ProductModel
from products.ports.product_directory import ProductDirectory


class DjangoProductDirectory(ProductDirectory):
    """Django ORM implementation of ProductDirectory."""

    def _to_domain(self, model: ProductModel) -> ProductReference:
        return ProductReference(id=model.id, name=model.name, version=model.version)

    @sync_to_async
    def find_by_id(self, product_id: int) -> Optional[ProductReference]:
        if product_id is None:
            return None
        try:
            model = ProductModel.objects.get(id=product_id)
            return self._to_domain(model)
        except ProductModel.DoesNotExist:
            return None

    @sync_to_async
    def find_many(
        self, product_ids: Iterable[int]
    ) -> Dict[int, ProductReference]:
        ids = {product_id for product_id in product_ids if product_id is not None}
        if not ids:
            return {}
        models = ProductModel.objects.filter(id__in=ids)
        return {model.id: self._to_domain(model) for model in models}
