"""Business logic for users."""

from .record_service import RecordService


class UserService(RecordService):
    """Users can be read, created and replaced, but not listed or deleted."""

    entity = "User"
