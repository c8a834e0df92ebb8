# 📄 File: app/modules/payments/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how payment receipts are stored in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for ``payments``; rows are removed with their user.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM, app.shared.infrastructure.database.connection (Base)
#
# 🔄 Connected Modules / Calls From:
# - payment_repository_impl.py

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func

from app.shared.infrastructure.database.connection import Base


class PaymentModel(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("persons.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(64), nullable=False)
    creation_date = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
