"""
License model.
"""
from django.db import models


class License(models.Model):
    """
    A license that can be linked to one business record.
    Licenses are soft-deleted through the ``removed`` timestamp.
    """

    STATUS_CHOICES = [
        ("active", "Active"),
        ("inactive", "Inactive"),
        ("expired", "Expired"),
    ]

    id = models.CharField(primary_key=True, max_length=100)
    business_id = models.BigIntegerField(null=True, blank=True, db_index=True)
    license_key = models.CharField(max_length=255, db_index=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default="active")
    issued = models.DateTimeField(null=True, blank=True)
    expired = models.DateTimeField(null=True, blank=True)
    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)
    removed = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "license"
        ordering = ["-created"]
        indexes = [
            models.Index(fields=["status"]),
        ]

    def __str__(self):
        return self.license_key
