import requests
from pathlib import Path
from tenacity import retry, stop_after_attempt, wait_exponential
from ..utils.logging import get_logger

logger = get_logger(__name__)

def read_archive(path: str, encoding: str = "utf-8") -> str:
    text = Path(path).read_text(encoding=encoding)
    logger.info(f"Read archive {path} ({len(text):,} chars)")
    return text

class ArchiveClient:
    def __init__(self, timeout_s: int = 30):
        self.timeout_s = timeout_s

    @retry(stop=stop_after_attempt(5), wait=wait_exponential(min=1, max=10))
    def _get(self, url: str) -> str:
        r = requests.get(url, timeout=self.timeout_s)
        r.raise_for_status()
        return r.text

    def fetch(self, url: str) -> str:
        logger.info(f"Downloading archive from {url}")
        text = self._get(url)
        logger.info(f"Downloaded {len(text):,} chars")
        return text
