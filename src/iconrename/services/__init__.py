from .rename_service import RenameService

__all__ = ["RenameService"]
