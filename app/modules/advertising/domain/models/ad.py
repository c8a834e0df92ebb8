# 📄 File: app/modules/advertising/domain/models/ad.py
# 🧭 Purpose (Layman Explanation):
# Describes an advertisement banner: who uploaded it, the picture, and when it may be shown.
# 🧪 Purpose (Technical Summary):
# Pydantic domain model for Ad with a showing window check. Dates are naive UTC.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# ad_service.py, ad repositories

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Ad(BaseModel):
    """An advertisement shown to free users between ``start_date`` and ``end_date``."""

    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: Optional[int] = None
    admin_id: int
    is_active: bool = False
    start_date: datetime
    end_date: datetime
    ad_file: Optional[str] = Field(None, max_length=256)

    def is_showing(self, moment: datetime) -> bool:
        return self.is_active and self.start_date <= moment <= self.end_date
