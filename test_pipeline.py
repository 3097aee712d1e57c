"""
Unit tests for sorting, deduplication and stage chaining.
"""

import asyncio

from models import Channel, Playlist
from pipeline import Pipeline, PlacedUrls, RemovePlaced, remove_duplicates, sort_channels


def make_playlist(*pairs):
    return Playlist(url="channels/uk.m3u", channels=[Channel(name=n, url=u) for n, u in pairs])


def names_urls(playlist):
    return [(ch.name, ch.url) for ch in playlist.channels]


class TestSortChannels:
    def test_sorts_by_name_then_url(self):
        playlist = make_playlist(("b", "http://2"), ("B", "http://3"), ("a", "http://9"), ("b", "http://1"))
        assert names_urls(sort_channels(playlist)) == [
            ("B", "http://3"), ("a", "http://9"), ("b", "http://1"), ("b", "http://2"),
        ]

    def test_resorting_is_a_noop(self):
        playlist = sort_channels(make_playlist(("z", "u1"), ("y", "u2"), ("y", "u0")))
        before = names_urls(playlist)
        assert names_urls(sort_channels(playlist)) == before


class TestRemoveDuplicates:
    def test_first_seen_wins(self):
        playlist = make_playlist(("A", "http://1"), ("B", "http://2"), ("C", "http://1"))
        assert names_urls(remove_duplicates(playlist)) == [("A", "http://1"), ("B", "http://2")]

    def test_idempotent(self):
        once = names_urls(remove_duplicates(make_playlist(("A", "u"), ("B", "u"), ("C", "v"))))
        twice = names_urls(remove_duplicates(remove_duplicates(make_playlist(("A", "u"), ("B", "u"), ("C", "v")))))
        assert once == twice

    def test_exact_url_match_only(self):
        playlist = make_playlist(("A", "http://x/1"), ("A", "HTTP://x/1"), ("A", "http://x/1/"))
        assert len(remove_duplicates(playlist).channels) == 3

    def test_sort_then_dedupe_keeps_lowest_name(self):
        playlist = make_playlist(("Zeta", "http://same"), ("Alpha", "http://same"))
        result = remove_duplicates(sort_channels(playlist))
        assert names_urls(result) == [("Alpha", "http://same")]


class TestPlacedUrls:
    def test_residual_pool_drops_placed_urls(self):
        placed = PlacedUrls()
        placed.add_playlist(make_playlist(("A", "http://1"), ("B", "http://2")))
        residual = make_playlist(("X", "http://2"), ("Y", "http://3"))
        assert names_urls(RemovePlaced(placed)(residual)) == [("Y", "http://3")]
        assert "http://1" in placed
        assert len(placed) == 2


class TestPipeline:
    def test_runs_sync_and_async_stages_in_order(self):
        calls = []

        def first(playlist):
            calls.append("first")
            return playlist

        async def second(playlist):
            calls.append("second")
            playlist.channels = playlist.channels[:1]
            return playlist

        pipeline = Pipeline([first, second, sort_channels])
        result = asyncio.run(pipeline.run(make_playlist(("b", "u1"), ("a", "u2"))))
        assert calls == ["first", "second"]
        assert names_urls(result) == [("b", "u1")]
