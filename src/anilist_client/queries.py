"""GraphQL queries used to fetch a single entity by id.

Each query selects every field its model knows about, so the result can be
marked as fully loaded. Embedded entities only get a summary selection.
"""

from typing import Dict

from .models.enums import EntityKind

_NAME_FIELDS = """
    first
    middle
    last
    full
    native
    alternative
    alternativeSpoiler
    userPreferred
"""

_PERSON_SUMMARY = """
    id
    name { full native userPreferred }
    languageV2
    image { large medium }
    siteUrl
"""

_CHARACTER_SUMMARY = """
    id
    name { full native userPreferred }
    image { large medium }
    gender
    siteUrl
"""

ANIME_QUERY = f"""
query ($id: Int) {{
  Media(id: $id, type: ANIME) {{
    id
    idMal
    title {{ romaji english native userPreferred }}
    format
    status
    description(asHtml: false)
    startDate {{ year month day }}
    endDate {{ year month day }}
    season
    seasonYear
    seasonInt
    episodes
    duration
    countryOfOrigin
    isLicensed
    source
    hashtag
    updatedAt
    coverImage {{ extraLarge large medium color }}
    bannerImage
    genres
    synonyms
    averageScore
    meanScore
    popularity
    isLocked
    trending
    favourites
    tags {{
      id
      name
      description
      category
      rank
      isGeneralSpoiler
      isMediaSpoiler
      isAdult
      userId
    }}
    relations {{
      edges {{
        id
        relationType
        isMainStudio
        node {{
          id
          type
          title {{ romaji english native userPreferred }}
          format
          status
          coverImage {{ large medium }}
          siteUrl
        }}
      }}
    }}
    characters(sort: [ROLE, RELEVANCE, ID]) {{
      edges {{
        role
        node {{ {_CHARACTER_SUMMARY} }}
        voiceActors(language: JAPANESE) {{ {_PERSON_SUMMARY} }}
      }}
    }}
    staff(sort: [RELEVANCE, ID]) {{
      edges {{
        role
        node {{ {_PERSON_SUMMARY} }}
      }}
    }}
    studios {{
      edges {{
        isMain
        node {{ id name isAnimationStudio siteUrl }}
      }}
    }}
    isFavourite
    isFavouriteBlocked
    isAdult
    nextAiringEpisode {{ id airingAt timeUntilAiring episode }}
    externalLinks {{ id url site siteId type language color icon notes isDisabled }}
    streamingEpisodes {{ title thumbnail url site }}
    siteUrl
  }}
}}
"""

CHARACTER_QUERY = f"""
query ($id: Int) {{
  Character(id: $id) {{
    id
    name {{ {_NAME_FIELDS} }}
    image {{ large medium }}
    description(asHtml: false)
    gender
    dateOfBirth {{ year month day }}
    age
    bloodType
    isFavourite
    isFavouriteBlocked
    siteUrl
    favourites
    modNotes
    media(sort: [POPULARITY_DESC]) {{
      edges {{
        characterRole
        node {{ id type title {{ romaji english native userPreferred }} siteUrl }}
        voiceActors {{ {_PERSON_SUMMARY} }}
      }}
    }}
  }}
}}
"""

PERSON_QUERY = f"""
query ($id: Int) {{
  Staff(id: $id) {{
    id
    name {{ {_NAME_FIELDS} }}
    languageV2
    image {{ large medium }}
    description(asHtml: false)
    primaryOccupations
    gender
    dateOfBirth {{ year month day }}
    dateOfDeath {{ year month day }}
    age
    homeTown
    bloodType
    isFavourite
    isFavouriteBlocked
    siteUrl
    favourites
    modNotes
    characters(sort: [FAVOURITES_DESC]) {{
      edges {{
        role
        node {{ {_CHARACTER_SUMMARY} }}
      }}
    }}
  }}
}}
"""

STUDIO_QUERY = """
query ($id: Int) {
  Studio(id: $id) {
    id
    name
    isAnimationStudio
    siteUrl
    isFavourite
    favourites
  }
}
"""

QUERIES: Dict[EntityKind, str] = {
    EntityKind.ANIME: ANIME_QUERY,
    EntityKind.CHARACTER: CHARACTER_QUERY,
    EntityKind.PERSON: PERSON_QUERY,
    EntityKind.STUDIO: STUDIO_QUERY,
}

# Key of the entity inside the response's ``data`` object.
ROOT_FIELDS: Dict[EntityKind, str] = {
    EntityKind.ANIME: "Media",
    EntityKind.CHARACTER: "Character",
    EntityKind.PERSON: "Staff",
    EntityKind.STUDIO: "Studio",
}
