"""
Businesses module - Business record management.

This module handles:
- Business entity and domain logic
- License registration and deregistration on business records
- Soft deletion of business records
- Paginated listing and detail lookup with joined reference data
"""
