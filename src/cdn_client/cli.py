"""Command-line harness that uploads one file and prints its stored name."""

import argparse
import asyncio
import io
import os
import sys
from pathlib import Path

from cdn_common import ConfigurationError, setup_logging

from cdn_client.client import HttpCdnClient
from cdn_client.config import load_client_config
from cdn_client.exceptions import CdnUploadError
from cdn_client.interfaces import CdnClient
from cdn_client.models import FileUpload, RandomNameFileUpload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cdn-upload",
        description="Upload one file to the CDN upload service",
    )
    parser.add_argument(
        "path", nargs="?", default="test", help="destination directory (default: test)"
    )
    parser.add_argument(
        "file_name", nargs="?", help="stored file name (default: a random UUID)"
    )
    parser.add_argument(
        "local_file", nargs="?", type=Path, help="file whose bytes are uploaded"
    )
    return parser


async def run(args: argparse.Namespace, client: CdnClient) -> str:
    """Performs the upload described by the parsed arguments."""
    content = io.BytesIO()
    if args.local_file is not None:
        content.write(args.local_file.read_bytes())

    if args.file_name is None:
        return await client.upload_file_with_random_name(
            RandomNameFileUpload(path=args.path, file_content=content)
        )

    await client.upload_file(
        FileUpload(path=args.path, file_name=args.file_name, file_content=content)
    )
    return args.file_name


async def _main(args: argparse.Namespace) -> str:
    config = load_client_config()
    async with HttpCdnClient(config) as client:
        return await run(args, client)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logger = setup_logging(os.getenv("LOG_LEVEL", "WARNING"))

    try:
        file_name = asyncio.run(_main(args))
    except (ConfigurationError, CdnUploadError, OSError, ValueError) as e:
        logger.error("Upload failed", extra={"error": str(e)})
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(file_name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
