# 📄 File: app/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how accounts are stored in the database: one table holds every person,
# with extra columns that only gardeners (users) fill in.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the Person hierarchy using single-table inheritance
# discriminated by ``person_type`` (``user`` / ``admin``).
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (Base)
# - app.shared.core.care_levels (ordinal enums)
#
# 🔄 Connected Modules / Calls From:
# - user_repository_impl.py, admin_repository_impl.py
# - migrations/versions (schema generation)

from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, String, false, func

from app.modules.user_management.domain.models.user import PersonRole
from app.shared.core.care_levels import ExperienceLevel, LightLevel, WaterLevel
from app.shared.infrastructure.database.connection import Base


class PersonModel(Base):
    """
    Every account able to log in. Emails are unique across users and admins.
    """

    __tablename__ = "persons"

    id = Column(Integer, primary_key=True, autoincrement=True)
    person_type = Column(String(16), nullable=False, index=True)
    username = Column(String(64), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(
        Enum(PersonRole, name="person_role", native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=PersonRole.USER,
    )
    contact = Column(String(9), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __mapper_args__ = {
        "polymorphic_on": person_type,
        "polymorphic_identity": "person",
    }

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id}, email='{self.email}')>"


class UserModel(PersonModel):
    """Gardener account: care preferences, location, avatar and premium flag."""

    role_paid = Column(Boolean, nullable=False, default=False, server_default=false())
    location = Column(String(64), nullable=True)
    care_experience = Column(Enum(ExperienceLevel, name="experience_level", native_enum=False), nullable=True)
    water_availability = Column(Enum(WaterLevel, name="water_level", native_enum=False), nullable=True)
    luminosity_availability = Column(Enum(LightLevel, name="light_level", native_enum=False), nullable=True)
    user_avatar = Column(String(256), nullable=True)

    __mapper_args__ = {"polymorphic_identity": "user"}


class AdminModel(PersonModel):
    __mapper_args__ = {"polymorphic_identity": "admin"}
