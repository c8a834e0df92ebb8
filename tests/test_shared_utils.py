"""
Tests for shared helpers: care levels, validators, pagination and security.
"""

from datetime import timedelta

import pytest
from sqlalchemy import select

from app.modules.plant_catalog.infrastructure.database.models import PlantModel
from app.shared.config.settings import Settings
from app.shared.core.care_levels import ExperienceLevel, LightLevel, PlantType, WaterLevel, parse_enum, parse_form_value
from app.shared.core.exceptions import AuthenticationError, ValidationError
from app.shared.core.security import ROLE_ADMIN, ROLE_USER, SecurityManager
from app.shared.utils.pagination import PageParams, apply_page, apply_sorting, paginated_response
from app.shared.utils.validators import (
    validate_contact,
    validate_email_address,
    validate_image_file,
    validate_password,
    validate_text_content,
)


class TestCareLevels:

    @pytest.mark.parametrize("value, expected", [
        ("Beginner", ExperienceLevel.BEGINNER),
        ("expert", ExperienceLevel.EXPERT),
        ("1", ExperienceLevel.INTERMEDIATE),
        (2, ExperienceLevel.EXPERT),
        (ExperienceLevel.BEGINNER, ExperienceLevel.BEGINNER),
    ])
    def test_parse_experience(self, value, expected):
        assert parse_enum(ExperienceLevel, value) is expected

    def test_levels_are_ordered(self):
        assert WaterLevel.LOW < WaterLevel.MEDIUM < WaterLevel.HIGH
        assert LightLevel.HIGH > LightLevel.LOW

    def test_plant_type_by_label(self):
        assert parse_enum(PlantType, "succulent") is PlantType.SUCCULENT
        assert PlantType.FRUIT.label == "Fruit"

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            parse_enum(WaterLevel, "Flooded")
        with pytest.raises(ValueError):
            parse_enum(WaterLevel, 7)

    def test_form_value_error_names_the_field(self):
        with pytest.raises(ValidationError) as exc_info:
            parse_form_value(LightLevel, "Dazzling", "luminosityNeeded")
        assert exc_info.value.details["field"] == "luminosityNeeded"
        assert exc_info.value.status_code == 422


class TestValidators:

    def test_email(self):
        assert validate_email_address("Rita@Leaflings.pt").is_valid
        assert not validate_email_address("not-an-email").is_valid
        assert not validate_email_address("").is_valid

    @pytest.mark.parametrize("contact, valid", [
        ("912345678", True),
        ("961234567", True),
        ("941234567", False),
        ("91234567", False),
        ("", False),
    ])
    def test_contact(self, contact, valid):
        assert validate_contact(contact).is_valid is valid

    def test_password_length(self):
        assert validate_password("secret").is_valid
        result = validate_password("short")
        assert not result.is_valid
        assert "at least 6" in result.first_error

    def test_text_content_is_trimmed(self):
        assert not validate_text_content("   ", "Title").is_valid
        assert validate_text_content("  Basil  ", "Name", max_length=5).is_valid
        assert not validate_text_content("Basilisk", "Name", max_length=5).is_valid

    def test_image_file(self):
        assert validate_image_file("leaf.PNG", 100, "image/png").is_valid
        result = validate_image_file("notes.txt", 100, "text/plain")
        assert not result.is_valid
        assert len(result.errors) == 2
        assert not validate_image_file("leaf.png", 0, "image/png").is_valid
        assert not validate_image_file("leaf.png", 2048, "image/png", max_size=1024).is_valid


class TestPagination:

    def test_page_params_normalization(self):
        params = PageParams(limit=0, page=0, sort="", order="desc")
        assert params.limit == 1
        assert params.page == 1
        assert params.sort == "id"
        assert params.descending

    def test_offset(self):
        assert PageParams(limit=10, page=3).offset == 20

    def test_sorting_ignores_case_and_underscores(self):
        stmt = apply_sorting(select(PlantModel), PlantModel, "ExpSuggested", descending=True)
        assert "ORDER BY plants.exp_suggested DESC" in str(stmt)

    @pytest.mark.parametrize("sort", ["id", "Id", "name", "water_needs"])
    def test_known_columns_sort_directly(self, sort):
        stmt = apply_sorting(select(PlantModel), PlantModel, sort)
        assert f"ORDER BY plants.{sort.lower()} ASC" in str(stmt)

    def test_unknown_sort_field_falls_back_to_id(self):
        stmt = apply_sorting(select(PlantModel), PlantModel, "nonsense")
        assert "ORDER BY plants.id ASC" in str(stmt)

    def test_apply_page_limits_and_offsets(self):
        sql = str(apply_page(select(PlantModel), PlantModel, PageParams(limit=5, page=2)))
        assert "LIMIT" in sql
        assert "OFFSET" in sql

    def test_default_sort_is_id_ascending(self):
        sql = str(apply_page(select(PlantModel), PlantModel, PageParams(limit=5)))
        assert "ORDER BY plants.id ASC" in sql

    def test_empty_page_is_no_content(self):
        assert paginated_response([], 0).status_code == 204
        assert paginated_response(["a"], 7) == {"data": ["a"], "total": 7}


class TestSecurityManager:

    @pytest.fixture()
    def security(self) -> SecurityManager:
        return SecurityManager(Settings(JWT_SECRET_KEY="unit-test-secret", BCRYPT_ROUNDS=4))

    def test_password_hashing(self, security):
        hashed = security.hash_password("secret123")
        assert hashed != "secret123"
        assert security.verify_password("secret123", hashed)
        assert not security.verify_password("wrong", hashed)

    def test_corrupt_hash_does_not_verify(self, security):
        assert not security.verify_password("secret123", "not-a-bcrypt-hash")

    def test_token_round_trip_keeps_claims(self, security):
        issued = security.create_access_token(person_id=42, role=ROLE_ADMIN)
        data = security.verify_token(issued.token)
        assert data.person_id == 42
        assert data.role == ROLE_ADMIN
        assert data.role_paid is False

    def test_role_paid_claim(self, security):
        issued = security.create_access_token(person_id=7, role=ROLE_USER, role_paid=True)
        assert security.verify_token(issued.token).role_paid is True

    def test_expired_token_rejected(self, security):
        issued = security.create_access_token(person_id=1, role=ROLE_USER, expires_delta=timedelta(seconds=-30))
        with pytest.raises(AuthenticationError, match="expired"):
            security.verify_token(issued.token)

    def test_foreign_signature_rejected(self, security):
        other = SecurityManager(Settings(JWT_SECRET_KEY="someone-else", BCRYPT_ROUNDS=4))
        token = other.create_access_token(person_id=1, role=ROLE_USER).token
        with pytest.raises(AuthenticationError):
            security.verify_token(token)

    def test_garbage_token_rejected(self, security):
        with pytest.raises(AuthenticationError):
            security.verify_token("definitely.not.a-jwt")
