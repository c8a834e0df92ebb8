# 📄 File: app/modules/advertising/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how advertisements are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for ``ads``; showing window stored as naive UTC timestamps.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, app.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - ad_repository_impl.py

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, ForeignKey, Integer, String

from app.shared.infrastructure.database.connection import Base


class AdModel(Base):
    __tablename__ = "ads"
    __table_args__ = (CheckConstraint("end_date >= start_date", name="ck_ads_window"),)

    id = Column(Integer, primary_key=True, autoincrement=True)
    admin_id = Column(Integer, ForeignKey("persons.id", ondelete="CASCADE"), nullable=False, index=True)
    is_active = Column(Boolean, nullable=False, default=False, index=True)
    start_date = Column(DateTime, nullable=False)
    end_date = Column(DateTime, nullable=False)
    ad_file = Column(String(256), nullable=True)
