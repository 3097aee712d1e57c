import re
import logging
from pathlib import Path
from typing import Dict, List, Tuple

from models import Channel, Playlist, RawEntry, TransportOptions
from normalizer import normalize

ATTR_RE = re.compile(r'([\w][\w\-]*)="([^"]*)"')
EXTINF_RE = re.compile(r'^#EXTINF:\s*(-?\d+(?:\.\d+)?)?((?:\s*[\w][\w\-]*="[^"]*")*)\s*,(.*)$')
EXTVLCOPT_PREFIX = "#EXTVLCOPT:"


class PlaylistError(ValueError):
    pass


class M3UParser:
    @staticmethod
    def read_text(file_path: str, config: Dict) -> str:
        encodings = config.get("encodings_to_try", ["utf-8", "cp1251", "latin-1"])
        if not Path(file_path).exists():
            raise FileNotFoundError(f"File {file_path} not found")
        for encoding in encodings:
            try:
                with open(file_path, 'r', encoding=encoding, newline='') as f:
                    content = f.read()
                logging.debug(f"Decoded {file_path} using {encoding} encoding")
                return content
            except UnicodeDecodeError:
                continue
        raise PlaylistError(f"File {file_path} could not be decoded")

    @staticmethod
    def parse_text(text: str) -> Tuple[Dict[str, str], List[RawEntry]]:
        header: Dict[str, str] = {}
        entries: List[RawEntry] = []
        current = None
        for line_number, line in enumerate(text.splitlines(), 1):
            line = line.strip()
            if not line:
                continue
            if line.startswith('#EXTM3U'):
                header.update(ATTR_RE.findall(line))
            elif line.startswith('#EXTINF:'):
                if current is not None:
                    entries.append(current)
                current = M3UParser._parse_extinf(line)
            elif line.upper().startswith(EXTVLCOPT_PREFIX):
                if current is None:
                    continue
                option = line.split(':', 1)[1].strip()
                key, _, value = option.partition('=')
                key = key.strip().lower()
                if key == 'http-referrer':
                    current.http.referrer = value.strip()
                elif key == 'http-user-agent':
                    current.http.user_agent = value.strip()
            elif line.startswith('#'):
                continue
            elif current is not None:
                current.url = line
                entries.append(current)
                current = None
            else:
                logging.warning(f"URL without EXTINF on line {line_number}: {line}")
        if current is not None:
            entries.append(current)
        return header, entries

    @staticmethod
    def _parse_extinf(line: str) -> RawEntry:
        match = EXTINF_RE.match(line)
        if match:
            attrs = dict(ATTR_RE.findall(match.group(2)))
            title = match.group(3)
        else:
            attrs = dict(ATTR_RE.findall(line))
            title = line.split(',', 1)[1] if ',' in line else ''
        return RawEntry(title=title.strip(), attrs=attrs, http=TransportOptions())

    @staticmethod
    def parse(file_path: str, config: Dict) -> Playlist:
        content = M3UParser.read_text(file_path, config)
        if not content.strip():
            raise PlaylistError(f"File {file_path} is empty")
        header, entries = M3UParser.parse_text(content)
        channels = []
        for entry in entries:
            channel = normalize(entry, header, file_path)
            if channel is not None:
                channels.append(channel)
        logging.info(f"Found {len(channels)} channels in {file_path}")
        return Playlist(url=file_path, header=header, channels=channels)

    @staticmethod
    def parse_index(file_path: str, config: Dict) -> List[RawEntry]:
        _, entries = M3UParser.parse_text(M3UParser.read_text(file_path, config))
        return [entry for entry in entries if entry.url]

    @staticmethod
    def dump_channel(channel: Channel, short: bool = False) -> str:
        identity = channel.identity
        language = identity.language or ";".join(l.name for l in channel.languages)
        info = (
            f'-1 tvg-id="{identity.id}" tvg-name="{identity.name}" '
            f'tvg-country="{identity.country.upper()}" tvg-language="{language}" '
            f'tvg-logo="{channel.logo or ""}"'
        )
        if not short:
            info += f' tvg-url="{channel.guide_url}"'
        info += f' group-title="{channel.category or ""}",{channel.name}'
        if channel.resolution.height:
            info += f' ({channel.resolution.height}p)'
        if channel.status:
            info += f' [{channel.status}]'
        if channel.http.referrer:
            info += f'\n{EXTVLCOPT_PREFIX}http-referrer={channel.http.referrer}'
        if channel.http.user_agent:
            info += f'\n{EXTVLCOPT_PREFIX}http-user-agent={channel.http.user_agent}'
        return f'#EXTINF:{info}\n{channel.url}\n'

    @staticmethod
    def dumps(playlist: Playlist, short: bool = False) -> str:
        parts = ['#EXTM3U']
        for key, value in playlist.header.items():
            if value:
                parts.append(f'{key}="{value}"')
        output = ' '.join(parts) + '\n'
        for channel in playlist.channels:
            output += M3UParser.dump_channel(channel, short)
        return output

    @staticmethod
    def save_playlist(playlist: Playlist, file_path: str, short: bool = True) -> bool:
        output = M3UParser.dumps(playlist, short)
        path = Path(file_path)
        if path.exists():
            with open(path, 'r', encoding='utf-8', errors='replace', newline='') as f:
                original = f.read()
            if original == output:
                logging.info("No changes have been made.")
                return False
        try:
            with open(path, 'w', encoding='utf-8', newline='') as f:
                f.write(output)
            logging.info(f"Playlist saved to {file_path} with {len(playlist.channels)} channels")
        except Exception as e:
            logging.error(f"Error saving playlist to {file_path}: {e}")
            raise
        return True
