# WORKFLOW: Download the published exchange rate spreadsheet.
# Used by: Seed script
# Functions:
# 1. download_file() - Stream the file into memory, logging progress
#
# Network errors are not retried; they reach the caller unmodified.

import logging
from typing import Optional

import requests

from core.config import settings
from core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def download_file(
    url: Optional[str] = None,
    timeout: Optional[int] = None,
    chunk_size: Optional[int] = None
) -> bytes:
    """
    Download the file and return its content.

    Args:
        url: File URL, defaults to settings.source_url
        timeout: Request timeout in seconds
        chunk_size: Streaming chunk size in bytes

    Returns:
        The whole file in memory

    Raises:
        ConfigError: If no URL is configured
        requests.RequestException: On any network or HTTP error
    """
    url = url or settings.source_url
    timeout = timeout or settings.request_timeout
    chunk_size = chunk_size or settings.download_chunk_size

    if not url:
        raise ConfigError("No source URL configured, set SOURCE_URL or pass --url")

    logger.info(f"Downloading file from {url}")
    buffers = []
    file_size = 0

    with requests.get(url, stream=True, timeout=timeout) as response:
        response.raise_for_status()
        for chunk in response.iter_content(chunk_size=chunk_size):
            if not chunk:
                continue
            buffers.append(chunk)
            file_size += len(chunk)
            logger.debug(f"{file_size} bytes")

    logger.info(f"File downloaded: {file_size} bytes")
    return b"".join(buffers)
