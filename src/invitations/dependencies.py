from src.invitations.repository.read_models import InvitationReadModel, SqlInvitationReadModel
from src.invitations.repository.write_models import InvitationWriteModel, SqlInvitationWriteModel


def get_invitation_read_model() -> InvitationReadModel:
    """Dependency to get invitation read model instance."""
    return SqlInvitationReadModel()


def get_invitation_write_model() -> InvitationWriteModel:
    """Dependency to get invitation write model instance."""
    return SqlInvitationWriteModel()
