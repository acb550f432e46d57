"""
Recommendation API Routes

Exposes the course recommendation block to the host's desktop and mobile callers.
"""

import logging
from typing import Optional

import jwt
from fastapi import APIRouter, Depends, Header, HTTPException, Query
from fastapi.responses import HTMLResponse, JSONResponse
from sqlalchemy.orm import Session

from db import get_db
from models.schemas_user import Viewer
from utils.auth_utils import bearer_token, decode_token
from utils.crud_user import get_user_by_id, viewer_for_user
from . import config
from .logic.adapter import EnrollmentSource, SqlEnrollmentSource, build_sample_source
from .logic.constants import ENGINE_VERSION
from .logic.contracts import RecommendationOutput
from .logic.engine import RecommendationEngine
from .presentation.desktop import block_content
from .presentation.images import CourseImageLookup, build_storage_client
from .presentation.mobile import mobile_block_view

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


# =============================================================================
# DEPENDENCIES
# =============================================================================

def current_viewer(
    authorization: Optional[str] = Header(default=None),
    db: Session = Depends(get_db)
) -> Viewer:
    """
    Resolve the visitor from the bearer token.

    Anything short of a valid token for an active user is an anonymous
    visitor; the block shows its login prompt rather than failing.
    """
    token = bearer_token(authorization)
    if token is None:
        return Viewer()
    try:
        data = decode_token(token)
        user_id = int(data.get("sub"))
    except (jwt.PyJWTError, TypeError, ValueError) as e:
        logger.warning(f"Token decode failed: {e}")
        return Viewer()
    return viewer_for_user(get_user_by_id(db, user_id))


def get_source(db: Session = Depends(get_db)) -> EnrollmentSource:
    if config.USE_MOCK_DATA:
        return build_sample_source()
    return SqlEnrollmentSource(db)


def get_image_lookup(db: Session = Depends(get_db)) -> Optional[CourseImageLookup]:
    if config.USE_MOCK_DATA:
        return None
    return CourseImageLookup(db, client=build_storage_client())


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("/block", response_class=HTMLResponse, summary="Desktop dashboard block")
def desktop_block(
    lang: Optional[str] = Query(default=None, description="Language code, e.g. 'en' or 'es'"),
    viewer: Viewer = Depends(current_viewer),
    source: EnrollmentSource = Depends(get_source),
    images: Optional[CourseImageLookup] = Depends(get_image_lookup)
):
    """
    Render the recommendation block as an HTML fragment.

    Anonymous and guest visitors get a login prompt; users with nothing
    to recommend get the empty-state message.
    """
    try:
        content = block_content(viewer, source, images=images, lang=lang)
        return HTMLResponse(content=content.text + content.footer)
    except Exception as e:
        logger.exception(f"Unexpected error in desktop_block: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.get("/mobile", summary="Mobile app block")
def mobile_block(
    lang: Optional[str] = Query(default=None),
    viewer: Viewer = Depends(current_viewer),
    source: EnrollmentSource = Depends(get_source)
):
    """Return the template payload for the mobile app."""
    try:
        return mobile_block_view(viewer, source, lang=lang)
    except Exception as e:
        logger.exception(f"Unexpected error in mobile_block: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.get("/courses", response_model=RecommendationOutput, summary="Raw course recommendations")
def recommended_courses(
    viewer: Viewer = Depends(current_viewer),
    source: EnrollmentSource = Depends(get_source)
):
    """Ranked ScoredCourse list for the current user."""
    if not viewer.can_receive_recommendations:
        raise HTTPException(status_code=401, detail="Login required")
    try:
        return RecommendationEngine(source).recommend_output(viewer.user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error in recommended_courses: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Recommendation engine health check")
def health_check():
    """Check if recommendation engine is operational."""
    return {"status": "ok", "engine": "course_recommendation", "version": ENGINE_VERSION}
