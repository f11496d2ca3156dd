from .i_file_system import IFileSystem

__all__ = [
    "IFileSystem",
]
