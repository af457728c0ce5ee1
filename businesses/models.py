from businesses.infrastructure.models import Business  # noqa: F401
