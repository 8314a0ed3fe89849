"""API routes."""

from fastapi import APIRouter

from ministry_hub.api import admin, analytics, auth, churches, content, health, images, ministry, people, upload

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(churches.router, prefix="/churches", tags=["churches"])
router.include_router(people.members_router, prefix="/members", tags=["members"])
router.include_router(people.ministers_router, prefix="/ministers", tags=["ministers"])
router.include_router(ministry.ranks_router, prefix="/ministry-ranks", tags=["ministry-ranks"])
router.include_router(ministry.skills_router, prefix="/ministry-skills", tags=["ministry-skills"])
router.include_router(content.events_router, prefix="/church-events", tags=["church-events"])
router.include_router(content.covers_router, prefix="/church-covers", tags=["church-covers"])
router.include_router(content.contact_router, prefix="/contact-us", tags=["contact-us"])
router.include_router(upload.router, prefix="/upload", tags=["upload"])
router.include_router(images.router, prefix="/images", tags=["images"])
router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
