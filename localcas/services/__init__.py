# Service layer exports
from localcas.services.display_service import DisplayService as DisplayService
from localcas.services.object_service import ObjectService as ObjectService

__all__ = [
    "DisplayService",
    "ObjectService",
]
