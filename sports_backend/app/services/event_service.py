"""Business logic for events."""

from .record_service import RecordService


class EventService(RecordService):
    entity = "Event"
