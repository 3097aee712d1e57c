import inspect
import logging
from typing import Callable, Iterable, Set

from models import Playlist


class PlacedUrls:
    """Urls of every channel already placed in a regular playlist during this run."""

    def __init__(self):
        self._urls: Set[str] = set()

    def add_playlist(self, playlist: Playlist) -> Playlist:
        for channel in playlist.channels:
            self._urls.add(channel.url)
        return playlist

    def __contains__(self, url: str) -> bool:
        return url in self._urls

    def __len__(self):
        return len(self._urls)


def sort_channels(playlist: Playlist) -> Playlist:
    logging.info("  Sorting channels...")
    playlist.channels = sorted(playlist.channels, key=lambda ch: (ch.name, ch.url))
    return playlist


def remove_duplicates(playlist: Playlist) -> Playlist:
    logging.info("  Looking for duplicates...")
    seen = set()
    channels = []
    for channel in playlist.channels:
        if channel.url in seen:
            continue
        seen.add(channel.url)
        channels.append(channel)
    removed = len(playlist.channels) - len(channels)
    if removed:
        logging.info(f"  Removed {removed} duplicate(s)")
    playlist.channels = channels
    return playlist


class RemovePlaced:
    """Drops channels whose url was already placed in another playlist."""

    def __init__(self, placed: PlacedUrls):
        self.placed = placed

    def __call__(self, playlist: Playlist) -> Playlist:
        logging.info("  Looking for duplicates...")
        channels = [ch for ch in playlist.channels if ch.url not in self.placed]
        if len(channels) != len(playlist.channels):
            logging.info(f"  Removed {len(playlist.channels) - len(channels)} channel(s) already placed")
            playlist.channels = channels
        return playlist


Stage = Callable[[Playlist], Playlist]


class Pipeline:
    """Applies stages in order. A stage may be a plain function or a coroutine function."""

    def __init__(self, stages: Iterable[Stage]):
        self.stages = list(stages)

    async def run(self, playlist: Playlist) -> Playlist:
        for stage in self.stages:
            result = stage(playlist)
            if inspect.isawaitable(result):
                result = await result
            playlist = result
        return playlist
