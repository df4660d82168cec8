"""Local filesystem implementation of the StorageClient interface."""

from collections.abc import AsyncIterator
from pathlib import Path

from cdn_common.logging import setup_logging
from starlette.concurrency import run_in_threadpool

from cdn_upload.exceptions import (
    FileAlreadyExistsError,
    PathOutsideStorageError,
    StorageUploadError,
    UploadCancelledError,
)
from cdn_upload.interfaces import StorageClient

logger = setup_logging()


class LocalFileStorage(StorageClient):
    """Stores uploads as plain files below a root directory."""

    def __init__(self, root: Path):
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def resolve_target(self, upload_path: str, file_name: str) -> Path:
        joined = self._root / upload_path / file_name
        try:
            target = joined.resolve()
        except ValueError:
            # embedded NUL bytes cannot name a file
            logger.info(
                "Upload target is not a valid path",
                extra={"upload_path": upload_path, "file_name": file_name},
            )
            raise PathOutsideStorageError(joined)

        if target == self._root or not target.is_relative_to(self._root):
            logger.info(
                "Upload target outside storage root",
                extra={"upload_path": upload_path, "file_name": file_name},
            )
            raise PathOutsideStorageError(target)
        return target

    async def exists(self, target: Path) -> bool:
        try:
            return await run_in_threadpool(target.exists)
        except ValueError:
            raise PathOutsideStorageError(target)

    async def save(self, target: Path, chunks: AsyncIterator[bytes]) -> int:
        directory = target.parent
        try:
            if not await run_in_threadpool(directory.is_dir):
                logger.info(
                    "Directory does not exist, creating it",
                    extra={"directory": str(directory)},
                )
                await run_in_threadpool(directory.mkdir, parents=True, exist_ok=True)
        except OSError as e:
            logger.exception(
                "Could not create directory", extra={"directory": str(directory)}
            )
            raise StorageUploadError(target, e) from e

        try:
            # "x" fails when another writer created the file after the existence check
            handle = await run_in_threadpool(open, target, "xb")
        except FileExistsError as e:
            logger.info("Target created concurrently", extra={"path": str(target)})
            raise FileAlreadyExistsError(target, e) from e
        except OSError as e:
            logger.exception("Could not create file", extra={"path": str(target)})
            raise StorageUploadError(target, e) from e

        written = 0
        try:
            async for chunk in chunks:
                await run_in_threadpool(handle.write, chunk)
                written += len(chunk)
        except UploadCancelledError:
            logger.info(
                "Upload cancelled, partial file left in place",
                extra={"path": str(target), "bytes_written": written},
            )
            raise
        except OSError as e:
            logger.exception(
                "Writing upload failed",
                extra={"path": str(target), "bytes_written": written},
            )
            raise StorageUploadError(target, e) from e
        finally:
            handle.close()

        logger.info(
            "File written to storage",
            extra={"path": str(target), "size": written},
        )
        return written
