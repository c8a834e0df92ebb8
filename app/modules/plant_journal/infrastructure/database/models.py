# 📄 File: app/modules/plant_journal/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how owned plants, diaries, diary entries and reminders are stored.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for ``user_plants``, ``diaries``, ``logs`` and ``warnings``.
# Foreign keys cascade: removing a user or plant removes ownerships, their diary and entries.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - journal_repository_impl.py

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint, func

from app.shared.infrastructure.database.connection import Base


class UserPlantModel(Base):
    __tablename__ = "user_plants"
    __table_args__ = (UniqueConstraint("user_id", "plant_id", name="uq_user_plants_user_plant"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("persons.id", ondelete="CASCADE"), nullable=False, index=True)
    plant_id = Column(Integer, ForeignKey("plants.id", ondelete="CASCADE"), nullable=False, index=True)


class DiaryModel(Base):
    __tablename__ = "diaries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_plant_id = Column(
        Integer, ForeignKey("user_plants.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    title = Column(String(64), nullable=False)
    creation_date = Column(DateTime(timezone=True), nullable=False, server_default=func.now())


class LogModel(Base):
    __tablename__ = "logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    diary_id = Column(Integer, ForeignKey("diaries.id", ondelete="CASCADE"), nullable=False, index=True)
    log_date = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    log_description = Column(String(500), nullable=False)


class WarningModel(Base):
    __tablename__ = "warnings"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("persons.id", ondelete="CASCADE"), nullable=False, index=True)
    location = Column(String(64), nullable=False)
    message = Column(String(255), nullable=False)
    reminder_date = Column(DateTime(timezone=True), nullable=False)
