# 📄 File: app/modules/payments/domain/models/payment.py
# 🧭 Purpose (Layman Explanation):
# A receipt saying that a user paid, when, and for what.
# 🧪 Purpose (Technical Summary):
# Pydantic domain model for Payment.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# payment_service.py, checkout_service.py, payment repositories

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Payment(BaseModel):
    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: Optional[int] = None
    user_id: int
    title: str = Field(..., min_length=1, max_length=64)
    creation_date: Optional[datetime] = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Title cannot be empty")
        return value
