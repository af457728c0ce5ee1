"""
Unit tests for the in-memory event bus.
"""

import pytest

from businesses.domain.events import BusinessCreated, BusinessRemoved
from core.domain.events import EventHandler
from core.infrastructure.events import InMemoryEventBus


class RecordingHandler(EventHandler):
    def __init__(self):
        self.events = []

    async def handle(self, event):
        self.events.append(event)


class FailingHandler(EventHandler):
    async def handle(self, event):
        raise RuntimeError("handler broke")


@pytest.mark.asyncio
class TestInMemoryEventBus:
    """Tests for InMemoryEventBus."""

    async def test_publish_to_subscribers(self):
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(BusinessCreated, handler)

        event = BusinessCreated(aggregate_id="1", name="Acme", customer_id=1, product_id=2)
        await bus.publish(event)

        assert handler.events == [event]

    async def test_publish_only_to_matching_type(self):
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(BusinessRemoved, handler)

        await bus.publish(
            BusinessCreated(aggregate_id="1", name="Acme", customer_id=1, product_id=2)
        )

        assert handler.events == []

    async def test_failing_handler_does_not_fail_publisher(self):
        bus = InMemoryEventBus()
        handler = RecordingHandler()
        bus.subscribe(BusinessRemoved, FailingHandler())
        bus.subscribe(BusinessRemoved, handler)

        await bus.publish(BusinessRemoved(aggregate_id="1", released_license_id="LIC1"))

        assert len(handler.events) == 1

    async def test_event_to_dict(self):
        event = BusinessRemoved(aggregate_id="7")

        data = event.to_dict()

        assert data["aggregate_id"] == "7"
        assert data["event_type"] == "BusinessRemoved"
        assert data["event_id"]
