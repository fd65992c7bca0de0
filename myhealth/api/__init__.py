"""
API routes aggregation.
"""

from fastapi import APIRouter
from myhealth.api.routes.auth import router as auth_router
from myhealth.api.routes.profile import router as profile_router
from myhealth.api.routes.chat import router as chat_router
from myhealth.api.routes.reports import router as reports_router

router = APIRouter()

# Include sub-routers
router.include_router(auth_router)
router.include_router(profile_router)
router.include_router(chat_router, prefix="/chat", tags=["chat"])
router.include_router(reports_router)
