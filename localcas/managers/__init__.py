# Local imports
from localcas.managers.manager import ObjectManager as ObjectManager

__all__ = ["ObjectManager"]
