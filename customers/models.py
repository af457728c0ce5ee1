from customers.infrastructure.models import Customer  # noqa: F401
