"""
Product model.
"""
from django.db import models


class Product(models.Model):
    """
    Represents a product release that a business can be registered for.
    The same product name can appear once per version.
    """

    name = models.CharField(max_length=255, help_text="Product display name")
    version = models.CharField(max_length=50, blank=True, default="")
    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "product"
        ordering = ["name", "version"]
        unique_together = [["name", "version"]]

    def clean(self):
        """Validate product fields."""
        from django.core.exceptions import ValidationError

        if not self.name:
            raise ValidationError("Name is required")

    def save(self, *args, **kwargs):
        """Save product with validation."""
        self.full_clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.name} {self.version}".strip()
