"""Reading schema documents from local files or over HTTP.

Every failure surfaces as JSONLoaderError, an UnreadableInputError, so
callers handle loading problems like any other unreadable schema.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .codegen.core.errors import UnreadableInputError
from .logging_config import get_logger

logger = get_logger(__name__)

SCHEMA_FETCH_TIMEOUT = 30


class JSONLoaderError(UnreadableInputError):
    """A schema document could not be read or decoded."""


def _decode(text: str, source: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Schema %s is not valid JSON: %s", source, e)
        raise JSONLoaderError(f"can't read schema as JSON: {source}: {e}") from e


def read_schema_file(path: str | Path) -> Any:
    """Decode the schema document stored at ``path``."""
    path = Path(path)
    if not path.is_file():
        logger.error("Schema file not found: %s", path)
        raise JSONLoaderError(f"can't read schema: file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Unable to read schema file %s: %s", path, e)
        raise JSONLoaderError(f"can't read schema: {path}: {e}") from e

    logger.debug("Read schema file %s", path)
    return _decode(text, str(path))


def fetch_schema(url: str, timeout: float = SCHEMA_FETCH_TIMEOUT) -> Any:
    """
    Download and decode a schema document.

    Args:
        url: http(s) URL of the document
        timeout: Request timeout in seconds

    Raises:
        JSONLoaderError: If the URL is not http(s), the request fails or the
            body is not JSON
    """
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise JSONLoaderError(f"can't read schema: invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.HTTPError as e:
        status = e.response.status_code if e.response is not None else "error"
        logger.error("Fetching %s failed with HTTP %s", url, status)
        raise JSONLoaderError(f"can't read schema: HTTP {status} from {url}") from e
    except requests.exceptions.Timeout as e:
        logger.error("Fetching %s timed out after %ss", url, timeout)
        raise JSONLoaderError(f"can't read schema: timed out fetching {url}") from e
    except requests.exceptions.RequestException as e:
        logger.error("Fetching %s failed: %s", url, e)
        raise JSONLoaderError(f"can't read schema: unable to fetch {url}: {e}") from e

    logger.debug("Fetched schema from %s", url)
    return _decode(response.text, url)


def load_schema(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: float = SCHEMA_FETCH_TIMEOUT,
) -> tuple[str, Any]:
    """
    Load a schema document from exactly one of a file or a URL.

    Returns:
        Tuple of (source, decoded document)
    """
    if (file_path is None) == (url is None):
        raise JSONLoaderError("exactly one of a schema file or a schema URL is required")

    if file_path is not None:
        return str(file_path), read_schema_file(file_path)
    return url, fetch_schema(url, timeout)
