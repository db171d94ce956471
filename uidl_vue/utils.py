"""Utility functions for loading UIDL documents.

This module provides functions for loading UIDL JSON from files, URLs and
raw text with proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Any, Dict
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)


class UIDLLoadError(Exception):
    """Custom exception for UIDL loading errors."""

    pass


def _require_object(data: Any, source: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        logger.error(f"UIDL document from {source} is not a JSON object")
        raise UIDLLoadError(f"UIDL document must be a JSON object: {source}")
    return data


def load_uidl_from_text(text: str, source: str = "<stdin>") -> tuple[str, Dict[str, Any]]:
    """Parse a UIDL document from a JSON string.

    Args:
        text: JSON text.
        source: Description used in messages.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        UIDLLoadError: If the text is not a JSON object.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON from {source}: {e}")
        raise UIDLLoadError(f"Invalid JSON from {source}: {e}") from e
    return source, _require_object(data, source)


def load_uidl_from_file(file_path: str | Path) -> tuple[str, Dict[str, Any]]:
    """Load a UIDL document from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        FileNotFoundError: If file doesn't exist.
        UIDLLoadError: If file cannot be read or JSON is invalid.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load UIDL from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}", exc_info=True)
        raise UIDLLoadError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise UIDLLoadError(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Successfully loaded UIDL from {file_path}")
    return str(file_path), _require_object(data, str(file_path))


def load_uidl_from_url(url: str, timeout: int = 30) -> tuple[str, Dict[str, Any]]:
    """Load a UIDL document from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        UIDLLoadError: If URL is invalid, request fails, or response isn't valid JSON.
    """
    logger.debug(f"Attempting to load UIDL from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise UIDLLoadError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise UIDLLoadError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise UIDLLoadError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise UIDLLoadError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.JSONDecodeError as e:
        logger.error(f"Invalid JSON response from URL {url}: {e}")
        raise UIDLLoadError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise UIDLLoadError(f"Request error for URL {url}: {e}") from e

    logger.info(f"Successfully loaded UIDL from {url}")
    return url, _require_object(data, url)


def load_uidl(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, Dict[str, Any]]:
    """Load a UIDL document from either a file or URL.

    Args:
        file_path: Path to local JSON file (mutually exclusive with url).
        url: URL to fetch JSON from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        UIDLLoadError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise UIDLLoadError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise UIDLLoadError("Cannot specify both file_path and url")

    if file_path:
        return load_uidl_from_file(file_path)
    else:
        return load_uidl_from_url(url, timeout)
