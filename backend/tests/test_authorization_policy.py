"""
Unit tests for the authorization policy.

Run with: pytest tests/test_authorization_policy.py -v
"""

from directchat.domain.entities.conversation import Conversation
from directchat.domain.entities.file import File
from directchat.domain.services import can_access_file, can_participate
from directchat.domain.value_objects import ConversationId, FileLocator, UserId

U1, U2, U3 = UserId(1), UserId(2), UserId(3)


def _conversation(a: UserId, b: UserId, conv_id: int = 1) -> Conversation:
    conversation = Conversation.start(party_a=a, party_b=b)
    conversation.id = ConversationId(conv_id)
    return conversation


def _file(owner: UserId) -> File:
    return File.record(
        original_name="report.pdf",
        locator=FileLocator("uploads/1/report.pdf"),
        size_bytes=1024,
        media_type="application/pdf",
        uploaded_by=owner,
    )


class TestCanParticipate:
    def test_either_party_participates(self):
        conversation = _conversation(U1, U2)
        assert can_participate(U1, conversation)
        assert can_participate(U2, conversation)

    def test_outsider_does_not_participate(self):
        assert not can_participate(U3, _conversation(U1, U2))


class TestCanAccessFile:
    def test_uploader_always_has_access(self):
        """No conversation needed for the uploader."""
        assert can_access_file(U1, _file(U1), [])

    def test_participant_of_referencing_conversation_has_access(self):
        assert can_access_file(U2, _file(U1), [_conversation(U1, U2)])

    def test_outsider_has_no_access(self):
        assert not can_access_file(U3, _file(U1), [_conversation(U1, U2)])

    def test_unrelated_user_without_references_has_no_access(self):
        assert not can_access_file(U2, _file(U1), [])

    def test_any_referencing_conversation_is_enough(self):
        """Shared into U1-U2 and U2-U3: U3 gets access through the second."""
        conversations = [_conversation(U1, U2, 1), _conversation(U2, U3, 2)]
        assert can_access_file(U3, _file(U1), conversations)
