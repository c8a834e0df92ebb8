# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# This file acts like a traffic director for all API requests, sending plant requests to plant
# handlers, diary requests to diary handlers, and so on.
# 🧪 Purpose (Technical Summary):
# Main API router aggregation that combines every module router under its resource prefix.
# 🔗 Dependencies:
# FastAPI, app.api.v1.health, app.modules.*.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# app.main.py (mounted under /api)

import logging
from typing import Dict

from fastapi import APIRouter

from app.modules.advertising.presentation.api.v1 import ads_router
from app.modules.payments.presentation.api.v1 import payments_router, paypal_router
from app.modules.plant_catalog.presentation.api.v1 import plants_router, tasks_router
from app.modules.plant_journal.presentation.api.v1 import (
    diaries_router,
    logs_router,
    user_plants_router,
    warnings_router,
)
from app.modules.plant_matching.presentation.api.v1 import matches_router
from app.modules.user_management.presentation.api.v1 import admins_router, auth_router, users_router

from .health import health_router

logger = logging.getLogger(__name__)

# Resource prefixes, relative to /api
ROUTE_PREFIXES: Dict[str, str] = {
    "auth": "/auth",
    "users": "/user",
    "admins": "/admin",
    "plants": "/plant",
    "tasks": "/task",
    "user_plants": "/userplants",
    "diaries": "/diary",
    "logs": "/log",
    "warnings": "/warning",
    "ads": "/ad",
    "payments": "/payment",
    "paypal": "/paypal",
}

# Create main API router
api_router = APIRouter()

api_router.include_router(health_router, tags=["Health Check"])

api_router.include_router(auth_router, prefix=ROUTE_PREFIXES["auth"], tags=["Authentication"])
api_router.include_router(matches_router, prefix=ROUTE_PREFIXES["users"], tags=["Plant Matching"])
api_router.include_router(users_router, prefix=ROUTE_PREFIXES["users"], tags=["Users"])
api_router.include_router(admins_router, prefix=ROUTE_PREFIXES["admins"], tags=["Admins"])

api_router.include_router(plants_router, prefix=ROUTE_PREFIXES["plants"], tags=["Plants"])
api_router.include_router(tasks_router, prefix=ROUTE_PREFIXES["tasks"], tags=["Tasks"])

api_router.include_router(user_plants_router, prefix=ROUTE_PREFIXES["user_plants"], tags=["User Plants"])
api_router.include_router(diaries_router, prefix=ROUTE_PREFIXES["diaries"], tags=["Diaries"])
api_router.include_router(logs_router, prefix=ROUTE_PREFIXES["logs"], tags=["Logs"])
api_router.include_router(warnings_router, prefix=ROUTE_PREFIXES["warnings"], tags=["Warnings"])

api_router.include_router(ads_router, prefix=ROUTE_PREFIXES["ads"], tags=["Ads"])
api_router.include_router(payments_router, prefix=ROUTE_PREFIXES["payments"], tags=["Payments"])
api_router.include_router(paypal_router, prefix=ROUTE_PREFIXES["paypal"], tags=["PayPal"])

logger.debug(f"API router assembled with {len(api_router.routes)} routes")
