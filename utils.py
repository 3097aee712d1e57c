import logging
import sys
from pathlib import Path
from typing import Dict, List

from normalizer import source_code


def setup_logging(config: Dict):
    handlers = []
    if config.get("log_to_file", False):
        log_file = Path(config.get("log_file", "curator.log"))
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    if not config.get("show_progress_bar", True) or not config.get("resolution", False):
        handlers.append(logging.StreamHandler(sys.stdout))
    logging.basicConfig(
        level=getattr(logging, str(config.get("log_level", "INFO")).upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )


def split_codes(value) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(',')
    return [code.strip().lower() for code in value if code.strip()]


def filter_playlists(urls: List[str], country=None, exclude=None) -> List[str]:
    include = split_codes(country)
    excluded = split_codes(exclude)
    result = []
    for url in urls:
        code = source_code(url).lower()
        if include and code not in include:
            continue
        if code in excluded:
            continue
        result.append(url)
    return result


def print_summary(results: List[Dict], elapsed_time: float):
    print(f"\n{'='*60}")
    print(f"PLAYLIST RESULTS")
    print(f"{'='*60}")
    updated = 0
    failed = 0
    total_channels = 0
    for result in results:
        if 'error' in result:
            failed += 1
            print(f"❌ {result['file']}: {result['error']}")
            continue
        total_channels += result['channels']
        state = "updated" if result['updated'] else "unchanged"
        if result['updated']:
            updated += 1
        print(f"✅ {result['file']}: {result['channels']} channels ({state})")
    print(f"\n{'='*60}")
    print(f"Playlists processed: {len(results) - failed}/{len(results)}")
    print(f"Playlists updated:   {updated}")
    print(f"Total channels:      {total_channels}")
    print(f"Total time:          {format_duration(elapsed_time)}")
    print(f"{'='*60}")


def format_duration(seconds: float) -> str:
    if seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        return f"{seconds//60:.0f}m {seconds%60:.0f}s"
    else:
        return f"{seconds//3600:.0f}h {(seconds%3600)//60:.0f}m {seconds%60:.0f}s"
