"""
Customers module - read-only Customer directory.

Business records reference customers by id and display the
customer name next to each record.
"""
