from .file_extension import COMMON_EXTENSIONS, FileExtension
from .relative_path import RelativePath
from .absolute_path import AbsolutePath
from .hash_value import HashValue
from .sha1 import Sha1
from .sha256 import Sha256

__all__ = [
    "COMMON_EXTENSIONS",
    "FileExtension",
    "RelativePath",
    "AbsolutePath",
    "HashValue",
    "Sha1",
    "Sha256",
]
