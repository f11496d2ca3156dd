"""
Dependency Injection Configuration.

This module wires together all the concrete implementations
following Clean Architecture principles.
"""

from typing import Annotated

from fastapi import Depends

from typed_fs.infrastructure.config.settings import Settings, get_settings
from typed_fs.infrastructure.file_system.local_file_system import LocalFileSystem

from typed_fs.application.common.path_guard import resolve_root
from typed_fs.application.interfaces.i_file_system import IFileSystem
from typed_fs.domain.value_objects.absolute_path import AbsolutePath

from typed_fs.application.use_cases.hash_file import HashFileUseCase
from typed_fs.application.use_cases.list_directory import ListDirectoryUseCase
from typed_fs.application.use_cases.build_file_tree import BuildFileTreeUseCase


# Settings
def get_app_settings() -> Settings:
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


# Root directory
def get_root_path(settings: SettingsDep) -> AbsolutePath:
    return resolve_root(settings.root_path)


RootPathDep = Annotated[AbsolutePath, Depends(get_root_path)]


# File System
def get_file_system(settings: SettingsDep) -> IFileSystem:
    return LocalFileSystem(chunk_size=settings.hash_chunk_size)


FileSystemDep = Annotated[IFileSystem, Depends(get_file_system)]


# Use Cases
def get_hash_file_use_case(
    file_system: FileSystemDep,
    root_path: RootPathDep,
) -> HashFileUseCase:
    return HashFileUseCase(file_system=file_system, root_path=root_path)


HashFileUseCaseDep = Annotated[HashFileUseCase, Depends(get_hash_file_use_case)]


def get_list_directory_use_case(
    file_system: FileSystemDep,
    root_path: RootPathDep,
    settings: SettingsDep,
) -> ListDirectoryUseCase:
    return ListDirectoryUseCase(
        file_system=file_system,
        root_path=root_path,
        ignored_directories=frozenset(settings.ignored_directories),
    )


ListDirectoryUseCaseDep = Annotated[
    ListDirectoryUseCase, Depends(get_list_directory_use_case)
]


def get_build_file_tree_use_case(
    file_system: FileSystemDep,
    root_path: RootPathDep,
    settings: SettingsDep,
) -> BuildFileTreeUseCase:
    return BuildFileTreeUseCase(
        file_system=file_system,
        root_path=root_path,
        max_initial_depth=settings.max_tree_depth,
        ignored_directories=frozenset(settings.ignored_directories),
    )


BuildFileTreeUseCaseDep = Annotated[
    BuildFileTreeUseCase, Depends(get_build_file_tree_use_case)
]
