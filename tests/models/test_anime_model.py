"""Unit tests for Anime deserialization and accessors."""

import pytest
from pydantic import ValidationError

from anilist_client.models import (
    Anime,
    CharacterRole,
    EntityKind,
    Format,
    Language,
    MediaType,
    Relation,
    RelationType,
    Season,
    Source,
    Status,
)


class TestAnimeDeserialization:
    """Test building an Anime from an API payload."""

    def test_scalar_fields(self, anime_payload):
        """Test camelCase fields land on snake_case attributes."""
        anime = Anime.model_validate(anime_payload)

        assert anime.id == 1
        assert anime.id_mal == 1
        assert anime.title.romaji == "Cowboy Bebop"
        assert str(anime.title) == "Cowboy Bebop"
        assert anime.format is Format.TV
        assert anime.status is Status.FINISHED
        assert anime.season is Season.SPRING
        assert anime.source is Source.ORIGINAL
        assert anime.season_year == 1998
        assert anime.episodes == 26
        assert anime.country_of_origin == "JP"
        assert anime.is_adult is False
        assert anime.url == "https://anilist.co/anime/1"
        assert anime.banner == "https://example.com/1-banner.jpg"
        assert anime.cover.extra_large == "https://example.com/bx1-xl.jpg"
        assert anime.cover.color == "#f1785d"
        assert anime.start_date.as_date().isoformat() == "1998-04-03"
        assert anime.tags[0].is_general_spoiler is False
        assert anime.external_links[0].link_type == "STREAMING"
        assert anime.streaming_episodes == []
        assert anime.next_airing_episode is None

    def test_not_full_loaded_by_default(self, anime_payload):
        """Test a freshly decoded anime is a partial snapshot."""
        anime = Anime.model_validate(anime_payload)
        assert anime.is_full_loaded is False
        assert anime.identity == (EntityKind.ANIME, 1)

    def test_minimal_payload(self):
        """Test only the always-requested fields are needed."""
        anime = Anime.model_validate(
            {
                "id": 20,
                "title": {"romaji": "Naruto"},
                "format": "TV",
                "status": "FINISHED",
                "isAdult": False,
                "siteUrl": "https://anilist.co/anime/20",
            }
        )
        assert anime.characters is None
        assert anime.staff is None
        assert anime.studios is None
        assert anime.genres is None
        assert anime.cover.large is None

    @pytest.mark.parametrize("missing", ["id", "title", "format", "status", "isAdult", "siteUrl"])
    def test_required_fields(self, anime_payload, missing):
        """Test a missing required field fails the whole anime."""
        del anime_payload[missing]
        with pytest.raises(ValidationError):
            Anime.model_validate(anime_payload)

    def test_unknown_enum_values_do_not_fail(self, anime_payload):
        """Test unknown enum strings degrade to defaults."""
        anime_payload["format"] = "HOLOGRAM"
        anime_payload["status"] = None
        anime_payload["season"] = "MONSOON"
        anime = Anime.model_validate(anime_payload)
        assert anime.format is Format.TV
        assert anime.status is Status.NOT_YET_RELEASED
        assert anime.season is Season.WINTER

    def test_null_cover(self, anime_payload):
        """Test a null coverImage gives an empty cover."""
        anime_payload["coverImage"] = None
        anime = Anime.model_validate(anime_payload)
        assert anime.cover.largest is None

    def test_extra_fields_ignored(self, anime_payload):
        """Test fields the model does not know are dropped."""
        anime_payload["somethingNew"] = {"a": 1}
        anime = Anime.model_validate(anime_payload)
        assert not hasattr(anime, "somethingNew")

    def test_snapshots_are_immutable(self, anime_payload):
        """Test models are frozen."""
        anime = Anime.model_validate(anime_payload)
        with pytest.raises(ValidationError):
            anime.episodes = 27


class TestAnimeEmbeddedEntities:
    """Test the flattened character/staff/studio collections."""

    def test_characters_with_roles(self, anime_payload):
        """Test character edges are flattened with their roles."""
        anime = Anime.model_validate(anime_payload)

        assert [c.id for c in anime.characters] == [1, 2]
        assert anime.characters[0].role is CharacterRole.MAIN
        assert anime.characters[1].role is CharacterRole.SUPPORTING
        assert all(not c.is_full_loaded for c in anime.characters)

    def test_voice_actors_from_edge(self, anime_payload):
        """Test edge voice actors are attached to the character."""
        anime = Anime.model_validate(anime_payload)

        spike, faye = anime.characters
        assert [p.id for p in spike.voice_actors] == [95011]
        assert spike.voice_actors[0].language is Language.JAPANESE
        assert faye.voice_actors is None

    def test_same_character_different_roles(self, anime_payload):
        """Test edge metadata is per media, not per character."""
        other = dict(anime_payload)
        other["id"] = 5
        other["characters"] = {"edges": [{"role": "BACKGROUND", "node": {"id": 1}}]}

        first = Anime.model_validate(anime_payload)
        second = Anime.model_validate(other)
        assert first.characters[0].id == second.characters[0].id == 1
        assert first.characters[0].role is CharacterRole.MAIN
        assert second.characters[0].role is CharacterRole.BACKGROUND

    def test_staff_roles(self, anime_payload):
        """Test staff edges carry the credit as staff_role."""
        anime = Anime.model_validate(anime_payload)
        assert [(p.id, p.staff_role) for p in anime.staff] == [
            (101, "Director"),
            (102, "Music"),
        ]

    def test_staff_nodes(self, anime_payload):
        """Test staff given as nodes decode without roles."""
        anime_payload["staff"] = {"nodes": [{"id": 101}, {"id": 102}]}
        anime = Anime.model_validate(anime_payload)
        assert [p.id for p in anime.staff] == [101, 102]
        assert anime.staff[0].staff_role is None

    def test_studios(self, anime_payload):
        """Test studio edges flatten with their main flag."""
        anime = Anime.model_validate(anime_payload)
        assert [(s.name, s.is_main) for s in anime.studios] == [
            ("Sunrise", True),
            ("Bandai Visual", False),
        ]

    def test_studio_nodes(self, anime_payload):
        """Test the nodes shape for studios."""
        anime_payload["studios"] = {"nodes": [{"id": 14, "name": "Sunrise", "isAnimationStudio": True}]}
        anime = Anime.model_validate(anime_payload)
        assert anime.studios[0].id == 14
        assert anime.studios[0].is_main is None

    def test_malformed_character_does_not_fail_anime(self, anime_payload):
        """Test a broken character edge becomes a placeholder."""
        anime_payload["characters"]["edges"].insert(0, {"node": {"id": "bad"}, "role": "MAIN"})
        anime = Anime.model_validate(anime_payload)
        assert [c.id for c in anime.characters] == [0, 1, 2]


class TestAnimeRelations:
    """Test on-demand decoding of relations."""

    def test_relations(self, anime_payload):
        """Test relation edges decode in order."""
        relations = Anime.model_validate(anime_payload).relations()

        assert len(relations) == 2
        assert relations[0].relation_type is RelationType.SIDE_STORY
        assert relations[0].media.id == 5
        assert relations[0].media.format is Format.MOVIE
        assert relations[1].relation_type is RelationType.ADAPTATION
        assert relations[1].media.media_type is MediaType.MANGA

    def test_no_relations(self, anime_payload):
        """Test absent relations give an empty list."""
        del anime_payload["relations"]
        assert Anime.model_validate(anime_payload).relations() == []

    @pytest.mark.parametrize("raw", [None, "junk", {"edges": None}, {"edges": "junk"}, []])
    def test_malformed_relations(self, anime_payload, raw):
        """Test malformed relation trees give an empty list."""
        anime_payload["relations"] = raw
        assert Anime.model_validate(anime_payload).relations() == []

    def test_null_edge_fields(self, anime_payload):
        """Test nulls on a relation edge and its node keep the edge."""
        anime_payload["relations"]["edges"].append(
            {"id": 30, "relationType": None, "isMainStudio": None, "node": {"id": None, "title": None}}
        )
        relation = Anime.model_validate(anime_payload).relations()[2]
        assert relation.id == 30
        assert relation.relation_type is RelationType.OTHER
        assert relation.is_main_studio is False
        assert relation.media.id == 0

    def test_bad_edge_becomes_default(self, anime_payload):
        """Test one broken relation edge is replaced by a default relation."""
        anime_payload["relations"]["edges"].append({"node": {"id": "not-a-number"}})
        relations = Anime.model_validate(anime_payload).relations()
        assert len(relations) == 3
        assert relations[2] == Relation()
        assert relations[2].relation_type is RelationType.OTHER
