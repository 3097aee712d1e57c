"""
End-to-end tests for a run over a small channels tree.
"""

import asyncio
import json
import logging

from config import DEFAULT_CONFIG
from main import main, parse_index, run
from utils import filter_playlists, setup_logging

INDEX = """#EXTM3U
#EXTINF:-1,United Kingdom
channels/uk.m3u
#EXTINF:-1,United States
channels/us.m3u
#EXTINF:-1,Unsorted
channels/unsorted.m3u
"""

UK = """#EXTM3U
#EXTINF:-1 tvg-id="" tvg-name="" tvg-country="" tvg-language="" tvg-logo="" group-title="",Zeta
http://stream.example.com/shared.m3u8
#EXTINF:-1 tvg-id="" tvg-name="" tvg-country="" tvg-language="" tvg-logo="" group-title="",Alpha
http://stream.example.com/shared.m3u8
#EXTINF:-1 tvg-id="" tvg-name="" tvg-country="" tvg-language="" tvg-logo="" group-title="",Beta
http://stream.example.com/beta.m3u8
"""

US = """#EXTM3U
#EXTINF:-1 tvg-id="" tvg-name="" tvg-country="" tvg-language="" tvg-logo="" group-title="News",CNN
http://stream.example.com/cnn.m3u8
"""

UNSORTED = """#EXTM3U
#EXTINF:-1,Other
http://stream.example.com/other.m3u8
#EXTINF:-1,Beta copy
http://stream.example.com/beta.m3u8
"""


def make_tree(tmp_path):
    (tmp_path / "channels").mkdir()
    (tmp_path / "index.m3u").write_text(INDEX, encoding="utf-8")
    (tmp_path / "channels" / "uk.m3u").write_text(UK, encoding="utf-8")
    (tmp_path / "channels" / "us.m3u").write_text(US, encoding="utf-8")
    (tmp_path / "channels" / "unsorted.m3u").write_text(UNSORTED, encoding="utf-8")


def make_config(**overrides):
    config = DEFAULT_CONFIG.copy()
    config.update(show_progress_bar=False)
    config.update(overrides)
    return config


class TestFilterPlaylists:
    urls = ["channels/uk.m3u", "channels/us.m3u", "channels/fr.m3u"]

    def test_include(self):
        assert filter_playlists(self.urls, "UK,fr") == ["channels/uk.m3u", "channels/fr.m3u"]

    def test_exclude(self):
        assert filter_playlists(self.urls, "", "us") == ["channels/uk.m3u", "channels/fr.m3u"]


class TestRun:
    def test_index_skips_unsorted_pool(self, tmp_path, monkeypatch):
        make_tree(tmp_path)
        monkeypatch.chdir(tmp_path)
        assert parse_index(make_config()) == ["channels/uk.m3u", "channels/us.m3u"]

    def test_full_run(self, tmp_path, monkeypatch):
        make_tree(tmp_path)
        monkeypatch.chdir(tmp_path)
        config = make_config()
        results, channels = asyncio.run(run(config, parse_index(config)))

        assert [r["file"] for r in results] == ["channels/uk.m3u", "channels/us.m3u", "channels/unsorted.m3u"]
        assert all(r["updated"] for r in results)

        uk = (tmp_path / "channels" / "uk.m3u").read_text(encoding="utf-8")
        assert uk == (
            '#EXTM3U\n'
            '#EXTINF:-1 tvg-id="" tvg-name="" tvg-country="UK" tvg-language="" tvg-logo="" group-title="",Alpha\n'
            'http://stream.example.com/shared.m3u8\n'
            '#EXTINF:-1 tvg-id="" tvg-name="" tvg-country="UK" tvg-language="" tvg-logo="" group-title="",Beta\n'
            'http://stream.example.com/beta.m3u8\n'
        )
        unsorted = (tmp_path / "channels" / "unsorted.m3u").read_text(encoding="utf-8")
        assert "beta.m3u8" not in unsorted
        assert "other.m3u8" in unsorted
        assert [ch.name for ch in channels] == ["Alpha", "Beta", "CNN", "Other"]

        results, _ = asyncio.run(run(config, parse_index(config)))
        assert not any(r["updated"] for r in results)

    def test_missing_source_does_not_abort(self, tmp_path, monkeypatch):
        make_tree(tmp_path)
        monkeypatch.chdir(tmp_path)
        results, _ = asyncio.run(run(make_config(), ["channels/missing.m3u", "channels/us.m3u"]))
        assert "error" in results[0]
        assert results[1]["channels"] == 1


class TestMain:
    def test_unreadable_index_is_fatal(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert asyncio.run(main(["-c", "missing.json", "--index", "missing.m3u", "--no-progress"])) == 1

    def test_export_json(self, tmp_path, monkeypatch):
        make_tree(tmp_path)
        monkeypatch.chdir(tmp_path)
        assert asyncio.run(main(["-c", "missing.json", "--no-progress", "--export-json", "out/channels.json"])) == 0
        exported = json.loads((tmp_path / "out" / "channels.json").read_text(encoding="utf-8"))
        cnn = next(item for item in exported if item["name"] == "CNN")
        assert cnn["category"] == "News"
        assert cnn["countries"] == [{"code": "us", "name": "United States"}]
        assert cnn["tvg"] == {"id": None, "name": None, "url": None}


class TestSetupLogging:
    def console_handlers(self):
        return [h for h in logging.getLogger().handlers if type(h) is logging.StreamHandler]

    def test_console_silent_while_progress_bar_runs(self):
        setup_logging({"log_to_file": False, "show_progress_bar": True, "resolution": True})
        assert self.console_handlers() == []

    def test_console_when_no_progress_bar(self):
        setup_logging({"log_to_file": False, "show_progress_bar": False, "resolution": True})
        assert len(self.console_handlers()) == 1
        setup_logging({"log_to_file": False, "show_progress_bar": True, "resolution": False})
        assert len(self.console_handlers()) == 1
