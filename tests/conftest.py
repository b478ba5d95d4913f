"""
Root test configuration for all tests.

Provides realistic AniList payloads and a fake transport so no test touches
the network.
"""

from typing import Any, Dict
from unittest.mock import AsyncMock

import pytest

from anilist_client import AniListClient


@pytest.fixture
def character_payload() -> Dict[str, Any]:
    """A character as returned by a by-id Character query."""
    return {
        "id": 2,
        "name": {
            "first": "Spike",
            "middle": None,
            "last": "Spiegel",
            "full": "Spike Spiegel",
            "native": "スパイク・スピーゲル",
            "alternative": ["Swimming Bird"],
            "alternativeSpoiler": [],
            "userPreferred": "Spike Spiegel",
        },
        "image": {
            "large": "https://s4.anilist.co/file/anilistcdn/character/large/b1-ChxaldmieFlQ.png",
            "medium": "https://s4.anilist.co/file/anilistcdn/character/medium/b1-ChxaldmieFlQ.png",
        },
        "description": "Spike is a bounty hunter.",
        "gender": "Male",
        "dateOfBirth": {"year": None, "month": 6, "day": 26},
        "age": "27",
        "bloodType": "B",
        "isFavourite": False,
        "isFavouriteBlocked": False,
        "siteUrl": "https://anilist.co/character/1",
        "favourites": 25000,
        "modNotes": None,
        "media": {"edges": [{"characterRole": "MAIN", "node": {"id": 1}}]},
    }


@pytest.fixture
def person_payload() -> Dict[str, Any]:
    """A staff member as returned by a by-id Staff query."""
    return {
        "id": 95011,
        "name": {"full": "Kouichi Yamadera", "native": "山寺宏一", "alternative": None},
        "languageV2": "Japanese",
        "image": {"large": "https://example.com/yamadera.png", "medium": None},
        "description": "Voice actor.",
        "primaryOccupations": ["Voice Actor", "Singer"],
        "gender": "Male",
        "dateOfBirth": {"year": 1961, "month": 6, "day": 17},
        "dateOfDeath": {"year": None, "month": None, "day": None},
        "age": 63,
        "homeTown": "Shiogama, Miyagi, Japan",
        "bloodType": "A",
        "siteUrl": "https://anilist.co/staff/95011",
        "favourites": 9000,
        "characters": {
            "edges": [
                {"role": "MAIN", "node": {"id": 3, "name": {"full": "Jet Black"}}},
                {"role": "SUPPORTING", "node": {"id": 2734, "name": {"full": "Togusa"}}},
            ]
        },
    }


@pytest.fixture
def anime_payload() -> Dict[str, Any]:
    """An anime as returned by a by-id Media query."""
    return {
        "id": 1,
        "idMal": 1,
        "title": {
            "romaji": "Cowboy Bebop",
            "english": "Cowboy Bebop",
            "native": "カウボーイビバップ",
            "userPreferred": "Cowboy Bebop",
        },
        "format": "TV",
        "status": "FINISHED",
        "description": "Enter a world in the distant future...",
        "startDate": {"year": 1998, "month": 4, "day": 3},
        "endDate": {"year": 1999, "month": 4, "day": 24},
        "season": "SPRING",
        "seasonYear": 1998,
        "seasonInt": 982,
        "episodes": 26,
        "duration": 24,
        "countryOfOrigin": "JP",
        "isLicensed": True,
        "source": "ORIGINAL",
        "hashtag": None,
        "updatedAt": 1717282421,
        "coverImage": {
            "extraLarge": "https://example.com/bx1-xl.jpg",
            "large": "https://example.com/bx1-l.jpg",
            "medium": "https://example.com/bx1-m.jpg",
            "color": "#f1785d",
        },
        "bannerImage": "https://example.com/1-banner.jpg",
        "genres": ["Action", "Adventure", "Drama", "Sci-Fi"],
        "synonyms": ["Cowboy Bebop"],
        "averageScore": 86,
        "meanScore": 86,
        "popularity": 380000,
        "isLocked": False,
        "trending": 12,
        "favourites": 20000,
        "tags": [
            {
                "id": 63,
                "name": "Space",
                "description": "Features space.",
                "category": "Setting-Universe",
                "rank": 94,
                "isGeneralSpoiler": False,
                "isMediaSpoiler": False,
                "isAdult": False,
            }
        ],
        "relations": {
            "edges": [
                {
                    "id": 28,
                    "relationType": "SIDE_STORY",
                    "isMainStudio": False,
                    "node": {
                        "id": 5,
                        "type": "ANIME",
                        "title": {"romaji": "Cowboy Bebop: Tengoku no Tobira"},
                        "format": "MOVIE",
                        "status": "FINISHED",
                        "siteUrl": "https://anilist.co/anime/5",
                    },
                },
                {
                    "id": 29,
                    "relationType": "ADAPTATION",
                    "isMainStudio": False,
                    "node": {
                        "id": 173,
                        "type": "MANGA",
                        "title": {"romaji": "Cowboy Bebop"},
                        "format": "MANGA",
                        "status": "FINISHED",
                    },
                },
            ]
        },
        "characters": {
            "edges": [
                {
                    "role": "MAIN",
                    "node": {"id": 1, "name": {"full": "Spike Spiegel"}, "gender": "Male"},
                    "voiceActors": [
                        {"id": 95011, "name": {"full": "Kouichi Yamadera"}, "languageV2": "Japanese"}
                    ],
                },
                {
                    "role": "SUPPORTING",
                    "node": {"id": 2, "name": {"full": "Faye Valentine"}, "gender": "Female"},
                },
            ]
        },
        "staff": {
            "edges": [
                {"role": "Director", "node": {"id": 101, "name": {"full": "Shinichirou Watanabe"}}},
                {"role": "Music", "node": {"id": 102, "name": {"full": "Yoko Kanno"}}},
            ]
        },
        "studios": {
            "edges": [
                {"isMain": True, "node": {"id": 14, "name": "Sunrise", "isAnimationStudio": True}},
                {"isMain": False, "node": {"id": 23, "name": "Bandai Visual", "isAnimationStudio": False}},
            ]
        },
        "isFavourite": False,
        "isFavouriteBlocked": False,
        "isAdult": False,
        "nextAiringEpisode": None,
        "externalLinks": [
            {"id": 1, "url": "https://www.crunchyroll.com/cowboy-bebop", "site": "Crunchyroll", "type": "STREAMING"}
        ],
        "streamingEpisodes": [],
        "siteUrl": "https://anilist.co/anime/1",
    }


@pytest.fixture
def fake_transport() -> AsyncMock:
    """Transport double; set ``fetch_by_id.return_value`` per test."""
    transport = AsyncMock()
    transport.fetch_by_id = AsyncMock()
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def client(fake_transport: AsyncMock) -> AniListClient:
    """Client wired to the fake transport."""
    return AniListClient(transport=fake_transport)
