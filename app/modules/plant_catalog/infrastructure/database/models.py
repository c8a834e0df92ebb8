# 📄 File: app/modules/plant_catalog/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how catalog plants and their care tasks are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for ``plants`` and ``plant_tasks``. Deleting a plant removes its tasks;
# deleting an admin keeps their plants and tasks with a cleared ``admin_id``.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - plant_repository_impl.py
# - plant_journal models (foreign keys to plants)

from sqlalchemy import Column, Enum, ForeignKey, Integer, String, Text

from app.shared.core.care_levels import ExperienceLevel, LightLevel, PlantType, WaterLevel
from app.shared.infrastructure.database.connection import Base


class PlantModel(Base):
    """Catalog plant."""

    __tablename__ = "plants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    admin_id = Column(Integer, ForeignKey("persons.id", ondelete="SET NULL"), nullable=True, index=True)
    name = Column(String(64), nullable=False, index=True)
    type = Column(
        Enum(PlantType, name="plant_type", native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    exp_suggested = Column(Enum(ExperienceLevel, name="experience_level", native_enum=False), nullable=False)
    water_needs = Column(Enum(WaterLevel, name="water_level", native_enum=False), nullable=False)
    luminosity_needed = Column(Enum(LightLevel, name="light_level", native_enum=False), nullable=False)
    description = Column(Text, nullable=True)
    plant_image = Column(String(256), nullable=True)

    def __repr__(self) -> str:
        return f"<PlantModel(id={self.id}, name='{self.name}')>"


class PlantTaskModel(Base):
    """Care task attached to a plant."""

    __tablename__ = "plant_tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    admin_id = Column(Integer, ForeignKey("persons.id", ondelete="SET NULL"), nullable=True, index=True)
    plant_id = Column(Integer, ForeignKey("plants.id", ondelete="CASCADE"), nullable=False, index=True)
    task_name = Column(String(48), nullable=False)
    task_description = Column(String(96), nullable=False)
