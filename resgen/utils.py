"""Utility functions for loading resource table documents.

A table arrives as a JSON document, read from a local file or fetched
over HTTP, and is then handed to ``table_from_dict``.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger
from .table import ResourceTable, table_from_dict

logger = get_logger(__name__)


class TableLoaderError(Exception):
    """Raised when a table document cannot be read or decoded."""

    pass


def load_table_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Read a table document from disk.

    Args:
        file_path: Path to the table document.

    Returns:
        Tuple of (source description, decoded document).

    Raises:
        FileNotFoundError: If there is no such file.
        TableLoaderError: If the file cannot be read or is not JSON.
    """
    file_path = Path(file_path)
    logger.debug(f"Reading resource table from {file_path}")

    if not file_path.is_file():
        logger.error(f"No resource table at {file_path}")
        raise FileNotFoundError(f"Resource table not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        # aapt-style dumps are sometimes saved without an extension
        logger.warning(f"Resource table {file_path} has no .json extension, reading it anyway")

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read resource table {file_path}: {e}")
        raise TableLoaderError(f"Cannot read resource table {file_path}: {e}") from e

    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Resource table {file_path} is not JSON: {e}", exc_info=True)
        raise TableLoaderError(
            f"Resource table {file_path} is not valid JSON (line {e.lineno}, column {e.colno})"
        ) from e

    logger.info(f"Read resource table document from {file_path}")
    return str(file_path), document


def load_table_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Fetch a table document over HTTP(S).

    Args:
        url: Location of the table document.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, decoded document).

    Raises:
        TableLoaderError: If the URL is unusable, the request fails, or the
            body is not JSON.
    """
    logger.debug(f"Fetching resource table from {url}")

    parsed_url = urlparse(url)
    if parsed_url.scheme not in ("http", "https") or not parsed_url.netloc:
        logger.error(f"Refusing to fetch resource table from {url!r}")
        raise TableLoaderError(f"Resource table URL must be http(s): {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"No response from {url} within {timeout}s")
        raise TableLoaderError(f"Timed out after {timeout}s fetching resource table from {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Cannot connect to {url}: {e}")
        raise TableLoaderError(f"Cannot connect to {url} to fetch the resource table") from e
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code
        logger.error(f"Resource table request to {url} answered {status}")
        raise TableLoaderError(f"Resource table request answered HTTP {status}: {url}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Resource table request to {url} failed: {e}", exc_info=True)
        raise TableLoaderError(f"Resource table request to {url} failed: {e}") from e

    try:
        document = response.json()
    except ValueError as e:
        # requests raises a ValueError subclass for undecodable bodies
        logger.error(f"Resource table from {url} is not JSON: {e}", exc_info=True)
        raise TableLoaderError(f"Resource table from {url} is not valid JSON") from e

    logger.info(f"Fetched resource table document from {url}")
    return url, document


def load_table_json(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Any]:
    """Read a table document from exactly one of a file or a URL.

    Raises:
        TableLoaderError: If not exactly one source is given, or loading fails.
        FileNotFoundError: If the file does not exist.
    """
    if bool(file_path) == bool(url):
        logger.error(f"Expected one table source, got file={file_path!r} url={url!r}")
        raise TableLoaderError("Give exactly one resource table source: a file path or a URL")

    if file_path:
        return load_table_json_from_file(file_path)
    return load_table_json_from_url(url, timeout)


def load_table(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> ResourceTable:
    """Load and build a ResourceTable.

    Raises:
        TableLoaderError: If the document cannot be loaded.
        TableFormatError: If the document is not a valid table.
    """
    source, document = load_table_json(file_path, url, timeout)
    table = table_from_dict(document)
    logger.debug(f"Built table {table.package} from {source}")
    return table
