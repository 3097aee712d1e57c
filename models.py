from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class Resolution:
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass(frozen=True)
class Country:
    code: str
    name: str


@dataclass(frozen=True)
class Language:
    code: str
    name: str


@dataclass
class Identity:
    id: str = ""
    name: str = ""
    country: str = ""
    language: str = ""
    url: str = ""


@dataclass
class TransportOptions:
    referrer: Optional[str] = None
    user_agent: Optional[str] = None


@dataclass
class RawEntry:
    """One #EXTINF block as read from disk, before normalization."""
    title: str = ""
    url: str = ""
    attrs: Dict[str, str] = field(default_factory=dict)
    http: TransportOptions = field(default_factory=TransportOptions)


@dataclass
class Channel:
    name: str
    url: str
    status: Optional[str] = None
    resolution: Resolution = field(default_factory=Resolution)
    logo: Optional[str] = None
    category: Optional[str] = None
    countries: List[Country] = field(default_factory=list)
    languages: List[Language] = field(default_factory=list)
    identity: Identity = field(default_factory=Identity)
    http: TransportOptions = field(default_factory=TransportOptions)

    @property
    def guide_url(self) -> str:
        if (self.identity.id or self.identity.name) and self.identity.url:
            return self.identity.url
        return ""

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "logo": self.logo or None,
            "url": self.url,
            "category": self.category or None,
            "languages": [{"code": l.code, "name": l.name} for l in self.languages],
            "countries": [{"code": c.code, "name": c.name} for c in self.countries],
            "tvg": {
                "id": self.identity.id or None,
                "name": self.identity.name or None,
                "url": self.identity.url or None,
            },
        }

    def __str__(self):
        return f"{self.name} - {self.url}"


@dataclass
class Playlist:
    url: str
    header: Dict[str, str] = field(default_factory=dict)
    channels: List[Channel] = field(default_factory=list)

    def __post_init__(self):
        self.channels = [ch for ch in self.channels if ch.url]

    @property
    def guide_url(self) -> str:
        return self.header.get("x-tvg-url", "")

    def __len__(self):
        return len(self.channels)
