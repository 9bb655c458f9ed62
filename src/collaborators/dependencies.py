from src.collaborators.repository.read_models import CollaboratorReadModel, SqlCollaboratorReadModel
from src.collaborators.repository.write_models import (
    CollaboratorWriteModel,
    SqlCollaboratorWriteModel,
)


def get_collaborator_read_model() -> CollaboratorReadModel:
    """Dependency to get collaborator read model instance."""
    return SqlCollaboratorReadModel()


def get_collaborator_write_model() -> CollaboratorWriteModel:
    """Dependency to get collaborator write model instance."""
    return SqlCollaboratorWriteModel()
