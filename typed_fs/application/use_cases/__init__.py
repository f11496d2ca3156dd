from .hash_file import HashFileUseCase
from .list_directory import ListDirectoryUseCase
from .build_file_tree import BuildFileTreeUseCase

__all__ = [
    "HashFileUseCase",
    "ListDirectoryUseCase",
    "BuildFileTreeUseCase",
]
