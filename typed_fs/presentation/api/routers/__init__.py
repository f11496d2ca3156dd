from .files_router import router as files_router

__all__ = ["files_router"]
