# 📄 File: app/modules/advertising/presentation/api/schemas/ad_schemas.py
# 🧭 Purpose (Layman Explanation):
# The data formats for advertisements as the apps see them.
#
# 🧪 Purpose (Technical Summary):
# Pydantic (camelCase) response schemas for /ad endpoints.
#
# 🔗 Dependencies:
# - app.shared.utils.schemas.CamelModel
#
# 🔄 Connected Modules / Calls From:
# - app.modules.advertising.presentation.api.v1.ads

from datetime import datetime
from typing import Optional

from app.shared.utils.schemas import CamelModel


class AdResponse(CamelModel):
    id: int
    admin_id: int
    is_active: bool
    start_date: datetime
    end_date: datetime
    ad_file: Optional[str] = None


class AdCountResponse(CamelModel):
    total: int
    active: int
