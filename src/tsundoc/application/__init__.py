from .client_resolver import ClientResolver
from .library_service import LibraryService

__all__ = ["ClientResolver", "LibraryService"]
