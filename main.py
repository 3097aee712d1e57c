import asyncio
import argparse
import json
import time
import sys
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple
from config import load_config
from parser import M3UParser
from checker import ResolutionChecker
from epg import EpgLoader, EpgMerger
from models import Channel
from pipeline import Pipeline, PlacedUrls, RemovePlaced, remove_duplicates, sort_channels
from utils import setup_logging, print_summary, filter_playlists


def parse_index(config: Dict) -> List[str]:
    index_file = config.get('index_file', 'index.m3u')
    unsorted_file = config.get('unsorted_file')
    logging.info(f"Parsing '{index_file}'...")
    urls = [entry.url for entry in M3UParser.parse_index(index_file, config)]
    urls = filter_playlists(urls, config.get('country'), config.get('exclude'))
    urls = [url for url in urls if url != unsorted_file]
    logging.info(f"Found {len(urls)} playlist(s)")
    return urls


async def process_playlist(url: str, config: Dict, pipeline: Pipeline) -> Tuple[dict, list]:
    logging.info(f"Processing '{url}'...")
    try:
        playlist = M3UParser.parse(url, config)
        playlist = await pipeline.run(playlist)
        updated = M3UParser.save_playlist(playlist, url, config.get('short_output', True))
        return {"file": url, "channels": len(playlist.channels), "updated": updated}, playlist.channels
    except Exception as e:
        logging.error(f"Failed to process '{url}': {e}")
        return {"file": url, "error": str(e)}, []


async def run(config: Dict, urls: List[str]) -> Tuple[List[dict], List[Channel]]:
    results = []
    exported: List[Channel] = []
    placed = PlacedUrls()
    async with ResolutionChecker(config) as checker, EpgLoader(config) as loader:
        pipeline = Pipeline([
            placed.add_playlist,
            sort_channels,
            remove_duplicates,
            checker,
            EpgMerger(config, loader),
        ])
        for url in urls:
            result, channels = await process_playlist(url, config, pipeline)
            results.append(result)
            exported.extend(channels)
    unsorted_file = config.get('unsorted_file')
    if urls and unsorted_file:
        residual = Pipeline([RemovePlaced(placed), sort_channels])
        result, channels = await process_playlist(unsorted_file, config, residual)
        results.append(result)
        exported.extend(channels)
    return results, exported


def export_json(channels: List[Channel], file_path: str):
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump([ch.to_dict() for ch in channels], f, ensure_ascii=False, indent=2)
    logging.info(f"Exported {len(channels)} channels to {file_path}")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='IPTV playlist curator')
    parser.add_argument('-c', '--config', default='config.json', help='Configuration file path')
    parser.add_argument('-d', '--debug', action='store_true', help='Debug mode')
    parser.add_argument('--index', help='Path to the index playlist')
    parser.add_argument('--country', help='Comma-separated list of country codes')
    parser.add_argument('--exclude', help='Comma-separated list of country codes to be excluded')
    parser.add_argument('--epg', action='store_true', help='Turn on EPG parser')
    parser.add_argument('--resolution', action='store_true', help='Turn on resolution parser')
    parser.add_argument('--delay', type=float, help='Delay between parser requests in seconds')
    parser.add_argument('--timeout', type=float, help='Timeout for each request in seconds')
    parser.add_argument('--no-progress', action='store_true', help='Disable progress bar')
    parser.add_argument('--export-json', help='Write all processed channels to a JSON file')
    return parser


def apply_args(config: Dict, args: argparse.Namespace) -> Dict:
    if args.debug:
        config['log_level'] = 'DEBUG'
    if args.index:
        config['index_file'] = args.index
    if args.country is not None:
        config['country'] = args.country
    if args.exclude is not None:
        config['exclude'] = args.exclude
    if args.epg:
        config['epg'] = True
    if args.resolution:
        config['resolution'] = True
    if args.delay is not None:
        config['delay'] = args.delay
    if args.timeout is not None:
        config['timeout'] = args.timeout
    if args.no_progress:
        config['show_progress_bar'] = False
    return config


async def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    config = apply_args(load_config(args.config), args)
    setup_logging(config)
    try:
        urls = parse_index(config)
    except Exception as e:
        logging.error(f"Could not read index '{config.get('index_file')}': {e}")
        return 1
    start_time = time.time()
    results, channels = await run(config, urls)
    if args.export_json:
        export_json(channels, args.export_json)
    print_summary(results, time.time() - start_time)
    logging.info("Done.")
    return 0


def cli():
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nProgram interrupted")
        sys.exit(1)


if __name__ == "__main__":
    cli()
