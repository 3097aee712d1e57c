import re
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import Dict, List, Optional

import lookups
from models import Channel, Country, Identity, Language, RawEntry, Resolution, TransportOptions

STATUS_RE = re.compile(r"\[(.*)\]")
RESOLUTION_RE = re.compile(r"\((\d+)P\)", re.IGNORECASE)
BRACKET_RE = re.compile(r"[\[\]]")


@dataclass
class ParsedTitle:
    name: str
    status: Optional[str]
    resolution: Resolution


def parse_title(title: str) -> ParsedTitle:
    tokens = [t.strip() for t in title.strip().split(" ")]
    name = " ".join(
        t for t in tokens
        if not BRACKET_RE.search(t) and not RESOLUTION_RE.search(t)
    ).strip()
    status_match = STATUS_RE.search(title)
    resolution_match = RESOLUTION_RE.search(title)
    height = int(resolution_match.group(1)) if resolution_match else None
    return ParsedTitle(
        name=name,
        status=status_match.group(1) if status_match else None,
        resolution=Resolution(width=None, height=height),
    )


def source_code(source_url: str) -> str:
    """channels/uk.m3u -> uk"""
    return PurePosixPath(source_url.replace("\\", "/")).stem


def parse_countries(value: str) -> List[Country]:
    codes: List[str] = []
    for token in (value or "").split(";"):
        for code in lookups.region2codes(token) or [token]:
            code = code.strip().lower()
            if code and code not in codes:
                codes.append(code)
    countries = []
    for code in codes:
        name = lookups.code2name(code)
        if name:
            countries.append(Country(code=code, name=name))
    return countries


def parse_languages(value: str) -> List[Language]:
    languages = []
    for name in (value or "").split(";"):
        code = lookups.language2code(name) if name else None
        if code:
            languages.append(Language(code=code, name=name))
    return languages


def parse_guide_languages(value: str) -> List[Language]:
    """Guide feeds declare languages as codes (en, eng) or plain names."""
    languages = []
    for token in (value or "").split(";"):
        token = token.strip()
        if not token:
            continue
        name = lookups.code2language(token)
        if name:
            languages.append(Language(code=lookups.language2code(name), name=name))
            continue
        code = lookups.language2code(token)
        if code:
            languages.append(Language(code=code, name=token))
    return languages


def normalize(entry: RawEntry, header: Dict[str, str], source_url: str) -> Optional[Channel]:
    if not entry.url:
        return None
    title = parse_title(entry.title)
    attrs = entry.attrs
    identity = Identity(
        id=attrs.get("tvg-id", ""),
        name=attrs.get("tvg-name", ""),
        country=attrs.get("tvg-country", ""),
        language=attrs.get("tvg-language", ""),
        url=header.get("x-tvg-url", ""),
    )
    countries = parse_countries(identity.country)
    if not countries:
        code = source_code(source_url)
        name = lookups.code2name(code)
        if name:
            countries = [Country(code=code.lower(), name=name)]
            identity.country = code.upper()
        else:
            identity.country = ""
    logo = attrs.get("tvg-logo", "")
    return Channel(
        name=title.name,
        url=entry.url,
        status=title.status,
        resolution=title.resolution,
        logo=logo or None,
        category=lookups.category_name(attrs.get("group-title", "")),
        countries=countries,
        languages=parse_languages(identity.language),
        identity=identity,
        http=TransportOptions(referrer=entry.http.referrer, user_agent=entry.http.user_agent),
    )
