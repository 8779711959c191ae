"""Fetching remote inputs so tools can be pointed at http(s) URLs."""

import hashlib
import logging
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

import requests

log = logging.getLogger(__name__)

# Cache directory name for downloaded inputs, created in the working directory
URL_CACHE_DIR_NAME = ".cvtools-url-cache"

# Seconds
DEFAULT_TIMEOUT = 30

DEFAULT_HEADERS = {
    "User-Agent": "cvtools/1.0 (OpenCV command-line tools)",
}


def is_url(path: str) -> bool:
    """Return True if ``path`` is an HTTP/HTTPS URL."""
    return path.startswith(("http://", "https://"))


def get_url_filename(url: str) -> str:
    """Last path component of a URL, or 'download' if it has none.

    The extension matters: cv2.imread and cv2.FileStorage pick the codec
    from it.
    """
    path = urlparse(url).path.rstrip("/")
    if path:
        return Path(path).name
    return "download"


def get_cache_path(url: str, cache_dir: Path) -> Path:
    """Deterministic cache location for a URL (``<hash>_<filename>``)."""
    url_hash = hashlib.sha256(url.encode()).hexdigest()[:16]
    return cache_dir / f"{url_hash}_{get_url_filename(url)}"


@dataclass
class UrlCacheResult:
    """Outcome of downloading a URL into the cache."""

    success: bool
    local_path: Path | None
    error: str | None = None


def download_url(
    url: str,
    cache_dir: Path,
    timeout: int = DEFAULT_TIMEOUT,
    force: bool = False,
) -> UrlCacheResult:
    """Download a URL into ``cache_dir`` unless it is already cached.

    The body is streamed into a ``.part`` file that only replaces the cache
    entry once complete, so an interrupted transfer never becomes a cache hit.

    Args:
        url: The URL to download.
        cache_dir: Directory to store cached files.
        timeout: Request timeout in seconds.
        force: Re-download even if a cached copy exists.

    Returns:
        UrlCacheResult with success status and local path.
    """
    cache_path = get_cache_path(url, cache_dir)

    if not force and cache_path.exists():
        log.debug("Using cached %s for %s", cache_path, url)
        return UrlCacheResult(success=True, local_path=cache_path)

    part_path = cache_path.with_suffix(cache_path.suffix + ".part")

    try:
        cache_dir.mkdir(parents=True, exist_ok=True)
        response = requests.get(url, timeout=timeout, stream=True, headers=DEFAULT_HEADERS)
        response.raise_for_status()

        with open(part_path, "wb") as f:
            for chunk in response.iter_content(chunk_size=8192):
                f.write(chunk)
        part_path.replace(cache_path)
    except (requests.RequestException, OSError) as e:
        if part_path.exists():
            part_path.unlink()
        return UrlCacheResult(success=False, local_path=None, error=str(e))

    log.debug("Downloaded %s to %s", url, cache_path)
    return UrlCacheResult(success=True, local_path=cache_path)


def ensure_url_downloaded(url: str, cache_dir: Path, force: bool = False) -> Path:
    """Download a URL if needed (always, with ``force``) and return the local path.

    Raises:
        RuntimeError: If the download fails.
    """
    result = download_url(url, cache_dir, force=force)
    if not result.success or result.local_path is None:
        raise RuntimeError(f"Failed to download URL {url}: {result.error}")
    return result.local_path


def resolve_input(filename: str, cache_dir: Path | None = None, refresh: bool = False) -> str:
    """Map a tool's input argument to a local path.

    Local paths are returned unchanged; URLs are downloaded into
    ``cache_dir`` (default: URL_CACHE_DIR_NAME in the working directory).
    With ``refresh`` a cached copy is downloaded again.
    """
    if not is_url(filename):
        return filename
    if cache_dir is None:
        cache_dir = Path.cwd() / URL_CACHE_DIR_NAME
    return str(ensure_url_downloaded(filename, cache_dir, force=refresh))
