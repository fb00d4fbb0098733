"""Business logic for tournaments."""

from .record_service import RecordService


class TournamentService(RecordService):
    entity = "Tournament"
