"""
Authorization Policy - who may read or write shared chat resources.

Both functions are pure: they only look at the objects they are given and
return a boolean. Callers turn ``False`` into the error kind that fits their
operation (AccessDeniedError, SenderNotParticipantError, ...).
"""

from typing import Iterable

from directchat.domain.entities.conversation import Conversation
from directchat.domain.entities.file import File
from directchat.domain.value_objects.user_id import UserId


def can_participate(user_id: UserId, conversation: Conversation) -> bool:
    """True iff the user is one of the two parties of the conversation."""
    return conversation.has_party(user_id)


def can_access_file(
    user_id: UserId,
    file: File,
    conversations_referencing_file: Iterable[Conversation],
) -> bool:
    """
    True iff the user uploaded the file, or takes part in at least one
    conversation holding a message that references it.

    ``conversations_referencing_file`` must only contain conversations with
    such a message; the policy does not re-check that.
    """
    if file.is_uploaded_by(user_id):
        return True
    return any(
        can_participate(user_id, conversation)
        for conversation in conversations_referencing_file
    )
