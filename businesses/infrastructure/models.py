"""
Business model.
"""
from django.db import models


class Business(models.Model):
    """
    A business registered for a customer and product, optionally licensed.
    Rows are never deleted; ``removed`` marks them soft-deleted.
    """

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=255, help_text="Business display name")
    customer_id = models.BigIntegerField(help_text="Referenced customer id")
    product_id = models.BigIntegerField(help_text="Referenced product id")
    license_id = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        help_text="Linked license id, empty when the business is available",
    )
    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)
    removed = models.DateTimeField(null=True, blank=True, db_index=True)

    class Meta:
        db_table = "business"
        ordering = ["-created", "-id"]
        indexes = [
            models.Index(fields=["removed", "created"]),
            models.Index(fields=["license_id"]),
        ]

    def __str__(self):
        return self.name
