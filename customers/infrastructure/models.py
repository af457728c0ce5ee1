"""
Customer model.
"""
from django.db import models


class Customer(models.Model):
    """A customer that businesses are registered for."""

    name = models.CharField(max_length=255, help_text="Customer display name")
    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "customer"
        ordering = ["name"]

    def __str__(self):
        return self.name
