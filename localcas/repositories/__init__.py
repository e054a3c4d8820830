# Local imports
from localcas.repositories.object_repository import ObjectRepository

__all__ = ["ObjectRepository"]
