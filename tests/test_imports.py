"""Tests for import chains and module integrity.

Ensures all public modules can be imported without errors and
that re-exports from __init__.py files work correctly.
"""


class TestSchemaImports:
    def test_import_reservation_schema(self):
        from fridai.schemas.reservation_schema import DialogState, Reservation, ReservationStep

        reservation = Reservation()
        assert reservation.time is None
        assert reservation.confirmed is None
        assert not reservation.is_terminal()
        assert DialogState(pending_step=ReservationStep.ASK_TIME).attempts == 0

    def test_import_activity_schema(self):
        from fridai.schemas.activity_schema import ActivityType, OutboundMessage

        assert ActivityType.MESSAGE == "message"
        assert OutboundMessage(text="hi").attachments == []


class TestConversationImports:
    def test_package_reexports(self):
        from fridai.conversation import (
            ReservationDialog,
            TurnDispatcher,
            transition,
        )

        assert callable(transition)
        assert ReservationDialog is not None
        assert TurnDispatcher is not None


class TestServiceImports:
    def test_package_reexports(self):
        from fridai.services import (
            FaqKnowledgeBase,
            KeywordRecognizer,
            MemoryStateStore,
            SsmlGenerator,
        )

        assert FaqKnowledgeBase and KeywordRecognizer and MemoryStateStore and SsmlGenerator


class TestBotWiring:
    def test_build_dispatcher_with_offline_backends(self):
        from fridai.bot import build_dispatcher
        from fridai.conversation.dispatcher import TurnDispatcher

        assert isinstance(build_dispatcher(), TurnDispatcher)

    def test_console_session_builds(self):
        from console_demo import ConsoleSession

        session = ConsoleSession()
        assert session.conversation_id.startswith("console-")
        assert "reservation" in session.SCENARIOS
