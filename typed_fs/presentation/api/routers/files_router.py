"""
Files Router - Endpoints for browsing and hashing files below the root.
"""

from dataclasses import replace

from fastapi import APIRouter, HTTPException, Query, status

from typed_fs.application.dtos.file_dtos import (
    DirectoryListingDTO,
    FileHashDTO,
    FileTreeDTO,
)
from typed_fs.domain.exceptions.domain_exceptions import (
    DomainError,
    InvalidFilePathError,
    PathNotFoundError,
    PathOutsideRootError,
)
from typed_fs.presentation.api.dependencies import (
    BuildFileTreeUseCaseDep,
    HashFileUseCaseDep,
    ListDirectoryUseCaseDep,
)

router = APIRouter(prefix="/files", tags=["files"])


def _to_http_error(error: DomainError) -> HTTPException:
    if isinstance(error, PathNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, (PathOutsideRootError, InvalidFilePathError)):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
    )


@router.get(
    "/entries",
    response_model=DirectoryListingDTO,
    summary="List a directory",
    description="List the direct children of a directory, directories first.",
)
async def list_entries(
    use_case: ListDirectoryUseCaseDep,
    path: str = Query(default="", description="Directory relative to the root"),
):
    """List a directory below the root."""
    try:
        return await use_case.execute(path)
    except DomainError as e:
        raise _to_http_error(e) from e


@router.get(
    "/hash",
    response_model=FileHashDTO,
    summary="Hash a file",
    description="Compute the SHA-1 and SHA-256 digests of a file.",
)
async def hash_file(
    use_case: HashFileUseCaseDep,
    path: str = Query(..., description="File relative to the root"),
):
    """Hash a file below the root."""
    try:
        return await use_case.execute(path)
    except DomainError as e:
        raise _to_http_error(e) from e


@router.get(
    "/tree",
    response_model=FileTreeDTO,
    summary="Get the file tree",
    description="Load the directory tree below the root to a limited depth.",
)
async def get_tree(
    use_case: BuildFileTreeUseCaseDep,
    depth: int | None = Query(default=None, ge=0, le=16),
):
    """Get the file tree below the root."""
    if depth is not None:
        use_case = replace(use_case, max_initial_depth=depth)
    try:
        return await use_case.execute()
    except DomainError as e:
        raise _to_http_error(e) from e
