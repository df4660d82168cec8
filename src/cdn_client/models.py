"""Request models for the upload client."""

from io import IOBase

from pydantic import BaseModel


class FileUpload(BaseModel, frozen=True, arbitrary_types_allowed=True):
    """A stream to store under an explicit file name."""

    path: str
    file_name: str
    file_content: IOBase


class RandomNameFileUpload(BaseModel, frozen=True, arbitrary_types_allowed=True):
    """A stream to store under a generated file name."""

    path: str
    file_content: IOBase
