import asyncio
import re
import aiohttp
import logging
from typing import Dict, Optional
from models import Playlist, Resolution
from progress import ProgressTracker

RESOLUTION_RE = re.compile(r'RESOLUTION=(\d+)x(\d+)')


def parse_resolution(content: str) -> Optional[Resolution]:
    best = None
    for match in RESOLUTION_RE.finditer(content):
        width, height = int(match.group(1)), int(match.group(2))
        if best is None or height > best.height:
            best = Resolution(width=width, height=height)
    return best


class ResolutionChecker:
    def __init__(self, config: Dict):
        self.config = config
        self.enabled = bool(config.get("resolution", False))
        self.timeout = config.get("timeout", 5)
        self.delay = config.get("delay", 0)
        self.max_content_length = config.get("max_content_length", 20000)
        self.user_agent = config.get("user_agent")
        self.show_progress = config.get("show_progress_bar", True)
        self.session = None

    async def __aenter__(self):
        if not self.enabled:
            return self
        connector = aiohttp.TCPConnector(
            ssl=bool(self.config.get("verify_ssl", False)),
        )
        self.session = aiohttp.ClientSession(
            connector=connector,
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            headers={'User-Agent': self.user_agent} if self.user_agent else None
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            await self.session.close()
            self.session = None

    async def _fetch(self, url: str) -> Optional[str]:
        try:
            async with self.session.get(url) as response:
                if response.status != 200:
                    logging.info(f"    {url} - HTTP {response.status}")
                    return None
                buf = bytearray()
                async for chunk in response.content.iter_chunked(8192):
                    buf.extend(chunk)
                    if len(buf) > self.max_content_length:
                        logging.info(f"    {url} - response exceeds {self.max_content_length} bytes")
                        return None
                return bytes(buf).decode(response.charset or 'utf-8', errors='replace')
        except asyncio.TimeoutError:
            logging.info(f"    {url} - Timeout")
        except (aiohttp.ClientError, ValueError, LookupError) as e:
            logging.info(f"    {url} - {type(e).__name__}: {e}")
        return None

    async def detect_resolution(self, channel) -> bool:
        content = await self._fetch(channel.url)
        if content is None or not content.lstrip().startswith("#EXTM3U"):
            return False
        resolution = parse_resolution(content)
        if resolution is None:
            return False
        channel.resolution = resolution
        logging.debug(f"    {channel.name} - {resolution.width}x{resolution.height}")
        return True

    async def __call__(self, playlist: Playlist) -> Playlist:
        if not self.enabled:
            return playlist
        logging.info("  Detecting resolution...")
        tracker = ProgressTracker(len(playlist.channels), self.show_progress)
        try:
            for channel in playlist.channels:
                found = await self.detect_resolution(channel)
                tracker.update(found)
                if self.delay:
                    await asyncio.sleep(self.delay)
        finally:
            tracker.close()
        logging.info(f"  Resolution detected for {tracker.found}/{tracker.total} channels ({tracker.get_elapsed_time():.1f}s)")
        return playlist
