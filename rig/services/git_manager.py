"""Fetches template repositories with git."""
import os
import subprocess
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from rig.core.errors import InvalidRepositoryUrl, TemplateFetchError
from rig.core.logger import get_logger

logger = get_logger(__name__)

GITHUB_BASE_URL = "https://github.com"


def normalize_repository_url(raw: str) -> str:
    """Turn a repository argument into a clonable URL.

    Full URLs and scp-style ``git@host:path`` addresses pass through;
    ``owner/repo`` shorthand points at GitHub.

    Raises:
        InvalidRepositoryUrl: If ``raw`` contains no ``/``
    """
    raw = raw.strip()
    if "/" not in raw:
        raise InvalidRepositoryUrl(raw)

    parsed = urlparse(raw)
    if parsed.scheme and parsed.netloc:
        return raw
    if raw.startswith("git@"):
        return raw
    return f"{GITHUB_BASE_URL}/{raw.strip('/')}"


def _is_valid_proxy(url: str) -> bool:
    parsed = urlparse(url)
    return bool(parsed.scheme and parsed.netloc)


class GitManager:
    """Clones template repositories, honouring HTTP proxy settings."""

    def __init__(self, mock: bool = False, timeout: Optional[int] = None):
        self.mock = mock
        self.timeout = timeout

    def find_proxy_url(self) -> Optional[str]:
        """Proxy from ``http_proxy``, else git's global ``http.proxy`` setting."""
        env_proxy = os.environ.get("http_proxy")
        if env_proxy:
            logger.debug("Setting proxy configuration from environment key: `http_proxy`.")
            return env_proxy if _is_valid_proxy(env_proxy) else None

        if self.mock:
            return None

        try:
            result = subprocess.run(
                ['git', 'config', '--global', '--get', 'http.proxy'],
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            logger.warning("Cannot locate git to read global configuration")
            return None

        proxy = result.stdout.strip()
        if result.returncode != 0 or not proxy:
            logger.debug("No proxy settings found.")
            return None
        if not _is_valid_proxy(proxy):
            logger.warning(f"Ignoring malformed http.proxy setting: {proxy}")
            return None
        return proxy

    def clone(self, url: str, dest: Path, proxy: Optional[str] = None) -> Path:
        """Shallow-clone ``url`` into ``dest``.

        Raises:
            TemplateFetchError: If git is missing, fails or times out
        """
        dest = Path(dest)
        if self.mock:
            logger.info(f"MOCK: Would clone {url} into {dest}")
            dest.mkdir(parents=True, exist_ok=True)
            return dest

        cmd = ['git']
        if proxy:
            logger.debug("Proxy settings found, passing them to git clone.")
            cmd += ['-c', f'http.proxy={proxy}']
        cmd += ['clone', '--depth', '1', url, str(dest)]

        logger.info(f"Cloning remote git repository: {url} into {dest}")
        try:
            subprocess.run(cmd, capture_output=True, text=True, check=True, timeout=self.timeout)
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.strip() if e.stderr else ""
            logger.error(f"Failed to clone {url}: {stderr or e}")
            raise TemplateFetchError(url, stderr) from e
        except subprocess.TimeoutExpired as e:
            raise TemplateFetchError(url, f"timed out after {self.timeout} seconds") from e
        except FileNotFoundError as e:
            raise TemplateFetchError(url, "Git not found. Please install git first.") from e

        return dest
