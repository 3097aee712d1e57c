import asyncio
import gzip
import io
import logging
import zlib
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

import aiohttp

from models import Playlist
from normalizer import parse_guide_languages


class EpgError(Exception):
    pass


@dataclass
class EpgName:
    value: str
    lang: Optional[str] = None


@dataclass
class EpgChannel:
    id: str
    names: List[EpgName] = field(default_factory=list)
    icons: List[str] = field(default_factory=list)


def parse_epg(data: bytes, url: str = "") -> Dict[str, EpgChannel]:
    """Builds a channel-id index from an XMLTV document (plain or gzipped)."""
    if url.lower().endswith(".gz") or data[:2] == b"\x1f\x8b":
        try:
            data = gzip.decompress(data)
        except (OSError, EOFError, zlib.error) as e:
            raise EpgError(f"Invalid gzip data: {e}") from e
    channels: Dict[str, EpgChannel] = {}
    try:
        for _, elem in ET.iterparse(io.BytesIO(data), events=("end",)):
            if elem.tag == "programme":
                elem.clear()
                continue
            if elem.tag != "channel":
                continue
            channel_id = (elem.attrib.get("id") or "").strip()
            if channel_id:
                names = [
                    EpgName(value=(n.text or "").strip(), lang=n.attrib.get("lang") or None)
                    for n in elem.findall("display-name")
                    if n.text and n.text.strip()
                ]
                icons = [i.attrib["src"] for i in elem.findall("icon") if i.attrib.get("src")]
                channels[channel_id] = EpgChannel(id=channel_id, names=names, icons=icons)
            elem.clear()
    except ET.ParseError as e:
        raise EpgError(f"Invalid XMLTV document: {e}") from e
    return channels


def merge_epg(playlist: Playlist, index: Dict[str, EpgChannel]) -> Playlist:
    for channel in playlist.channels:
        if not channel.identity.id:
            continue
        item = index.get(channel.identity.id)
        if item is None:
            continue
        if not channel.identity.name and item.names:
            channel.identity.name = item.names[0].value
        if not channel.languages and item.names and item.names[0].lang:
            channel.languages = parse_guide_languages(item.names[0].lang)
        if not channel.logo and item.icons:
            channel.logo = item.icons[0]
    return playlist


class EpgLoader:
    """Fetches guide feeds; each url is loaded at most once per run."""

    def __init__(self, config: Dict):
        self.config = config
        self.timeout = config.get("epg_timeout", 60)
        self.user_agent = config.get("user_agent")
        self.session = None
        self._cache: Dict[str, Union[Dict[str, EpgChannel], EpgError]] = {}

    async def __aenter__(self):
        self.session = aiohttp.ClientSession(
            connector=aiohttp.TCPConnector(ssl=bool(self.config.get("verify_ssl", False))),
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            headers={'User-Agent': self.user_agent} if self.user_agent else None
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.session:
            await self.session.close()
            self.session = None

    async def _fetch(self, url: str) -> bytes:
        try:
            async with self.session.get(url) as response:
                if response.status != 200:
                    raise EpgError(f"HTTP {response.status}")
                return await response.read()
        except asyncio.TimeoutError as e:
            raise EpgError("Timeout") from e
        except (aiohttp.ClientError, ValueError) as e:
            raise EpgError(str(e) or type(e).__name__) from e

    async def load(self, url: str) -> Dict[str, EpgChannel]:
        if url not in self._cache:
            try:
                index = parse_epg(await self._fetch(url), url)
                logging.info(f"  Loaded {len(index)} guide channels from '{url}'")
                self._cache[url] = index
            except EpgError as e:
                self._cache[url] = e
        cached = self._cache[url]
        if isinstance(cached, EpgError):
            raise cached
        return cached


class EpgMerger:
    def __init__(self, config: Dict, loader: EpgLoader):
        self.enabled = bool(config.get("epg", False))
        self.loader = loader

    async def __call__(self, playlist: Playlist) -> Playlist:
        if not self.enabled or not playlist.guide_url:
            return playlist
        logging.info(f"  Adding data from '{playlist.guide_url}'...")
        try:
            index = await self.loader.load(playlist.guide_url)
        except EpgError as e:
            logging.warning(f"  EPG could not be loaded: {e}")
            return playlist
        return merge_epg(playlist, index)
