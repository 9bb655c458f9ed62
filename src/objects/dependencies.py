from src.config.settings import settings
from src.objects.repository.object_store import LocalObjectStore, ObjectStore


def get_object_store() -> ObjectStore:
    """Dependency to get the object store."""
    return LocalObjectStore(
        private_dir=settings.private_object_dir,
        public_search_paths=settings.get_public_object_search_paths(),
    )
