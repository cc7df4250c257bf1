"""
Tests for the entity <-> DTO mappers.
"""
from datetime import date

from portfolio_api.app.entities import Achievement, Aspiration, Experience, Profile
from portfolio_api.app.mappers import (
    achievement_mapper,
    aspiration_mapper,
    experience_mapper,
    profile_mapper,
)
from portfolio_api.app.schemas import AchievementDTO, AspirationDTO, ExperienceDTO, ProfileDTO


def test_achievement_to_dto_renames_slug_and_flattens_profile():
    entity = Achievement(
        achievement_id=7,
        profile_id=1,
        slug="first-commit",
        title="First Commit",
        subtitle="Hello world",
        emoji="🚀",
        progress_percent=100,
        variant="gold",
        stat_label="Commits",
        stat_value="1",
        sort_order=0,
    )

    dto = achievement_mapper.to_dto(entity)

    assert dto.id == "first-commit"
    assert dto.achievement_id == 7
    assert dto.profile_id == 1
    assert dto.emoji == "🚀"
    assert dto.stat_value == "1"


def test_dto_serialises_with_camel_case_keys():
    dto = achievement_mapper.to_dto(Achievement(achievement_id=3, profile_id=1, slug="x", progress_percent=40))

    data = dto.model_dump(by_alias=True)

    assert data["achievementId"] == 3
    assert data["profileId"] == 1
    assert data["id"] == "x"
    assert data["progressPercent"] == 40
    assert data["statLabel"] is None


def test_child_without_parent_maps_to_null_profile_id():
    dto = aspiration_mapper.to_dto(Aspiration(aspiration_id=2, slug="learn-rust"))
    assert dto.profile_id is None


def test_to_entity_keeps_parent_as_bare_id():
    dto = ExperienceDTO(profileId=4, id="acme", company="Acme")

    entity = experience_mapper.to_entity(dto)

    assert entity.profile_id == 4
    assert entity.slug == "acme"
    assert entity.experience_id is None


def test_round_trip_preserves_every_field():
    """to_dto(to_entity(dto)) gives back the DTO it started from."""
    dtos = [
        (profile_mapper, ProfileDTO(firstName="John", lastName="Doe", photoUrl="https://x/p.jpg", status="Coding")),
        (
            achievement_mapper,
            AchievementDTO(
                profileId=1, id="a", title="T", subtitle="S", emoji="*", progressPercent=55,
                variant="blue", statLabel="L", statValue="V", sortOrder=2,
            ),
        ),
        (
            aspiration_mapper,
            AspirationDTO(
                profileId=1, id="b", title="T", subtitle="S", statusText="Planned", progressPercent=10,
                variant="green", footerText="F", animated=True, sortOrder=1,
            ),
        ),
        (
            experience_mapper,
            ExperienceDTO(
                profileId=1, id="c", company="Acme", role="Engineer", roleStyle="primary",
                description="D", startDate=date(2020, 1, 1), endDate=None, sortOrder=0,
            ),
        ),
    ]
    for mapper, dto in dtos:
        assert mapper.to_dto(mapper.to_entity(dto)) == dto


def test_to_dto_list_preserves_order():
    entities = [Profile(profile_id=i, first_name=f"P{i}") for i in (3, 1, 2)]

    result = profile_mapper.to_dto_list(entities)

    assert [dto.profile_id for dto in result] == [3, 1, 2]
    assert profile_mapper.to_dto_list([]) == []


def test_experience_dates_are_copied():
    entity = Experience(experience_id=1, profile_id=1, start_date=date(2019, 5, 1), end_date=date(2021, 6, 30))

    dto = experience_mapper.to_dto(entity)

    assert dto.start_date == date(2019, 5, 1)
    assert dto.end_date == date(2021, 6, 30)
