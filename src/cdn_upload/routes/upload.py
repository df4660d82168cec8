"""File upload endpoint."""

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Annotated

from cdn_common.logging import setup_logging
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from starlette.datastructures import FormData, UploadFile

from cdn_upload.dependencies import get_storage
from cdn_upload.exceptions import (
    FileAlreadyExistsError,
    PathOutsideStorageError,
    StorageUploadError,
    UploadCancelledError,
)
from cdn_upload.interfaces import StorageClient

logger = setup_logging()

router = APIRouter(tags=["upload"])

StorageDep = Annotated[StorageClient, Depends(get_storage)]

CHUNK_SIZE = 1024 * 1024
FORM_CONTENT_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")
CLIENT_CLOSED_REQUEST = 499


def _has_form_content_type(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type in FORM_CONTENT_TYPES


def _first_file(form: FormData) -> UploadFile | None:
    for _, value in form.multi_items():
        if isinstance(value, UploadFile):
            return value
    return None


async def _read_chunks(
    request: Request, upload: UploadFile, target: Path
) -> AsyncIterator[bytes]:
    """Yields the uploaded content, stopping if the client goes away."""
    while True:
        chunk = await upload.read(CHUNK_SIZE)
        if not chunk:
            break
        if await request.is_disconnected():
            raise UploadCancelledError(target)
        yield chunk


@router.post("/", response_class=Response, name="upload")
async def upload_file(
    request: Request,
    storage: StorageDep,
    upload_path: Annotated[str | None, Query(alias="uploadPath")] = None,
) -> Response:
    """
    Stores the first file of a multipart form under ``uploadPath``.

    The file keeps the name declared in the form. Existing files are never
    overwritten; every validation failure is answered with 400.
    """
    if not _has_form_content_type(request):
        logger.info("Request was not a form, returning BadRequest")
        raise HTTPException(status_code=400, detail="Request has to be a form")

    async with request.form() as form:
        upload = _first_file(form)
        if upload is None:
            logger.info("Request did not contain a file, returning BadRequest")
            raise HTTPException(
                status_code=400, detail="Request has to contain a file"
            )

        if upload_path is None or not upload_path.strip():
            logger.info("Upload path is missing or blank, returning BadRequest")
            raise HTTPException(
                status_code=400, detail="uploadPath has to be defined and non-empty"
            )

        # parts with an empty filename never reach here, Starlette reads them as fields
        file_name = upload.filename or ""
        if not file_name.strip():
            logger.info("File name is whitespace only, returning BadRequest")
            raise HTTPException(
                status_code=400,
                detail="File name has to contain non-whitespace characters",
            )

        try:
            target = storage.resolve_target(upload_path, file_name)
            target_exists = await storage.exists(target)
        except PathOutsideStorageError:
            raise HTTPException(
                status_code=400,
                detail="uploadPath and file name have to name a file inside storage",
            )

        if target_exists:
            logger.info(
                "Path to be used already exists, returning BadRequest",
                extra={"path": str(target)},
            )
            raise HTTPException(status_code=400, detail="File already exists")

        try:
            size = await storage.save(target, _read_chunks(request, upload, target))
        except FileAlreadyExistsError:
            raise HTTPException(status_code=400, detail="File already exists")
        except UploadCancelledError:
            raise HTTPException(
                status_code=CLIENT_CLOSED_REQUEST, detail="Client closed request"
            )
        except StorageUploadError:
            raise HTTPException(status_code=500, detail="File upload failed")

    logger.info(
        "File saved, returning Ok",
        extra={"upload_path": upload_path, "file_name": file_name, "size": size},
    )
    return Response(status_code=200)
