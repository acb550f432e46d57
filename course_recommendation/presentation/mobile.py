"""
Mobile app block

Builds the payload the mobile app renders: a single "main" template, the data
behind it and a click handler that opens the course in the system browser.
"""

import json
from html import escape
from typing import Any, Dict, List, Optional

from models.schemas_user import Viewer
from ..config import WWWROOT
from ..logic.adapter import EnrollmentSource
from ..logic.contracts import ScoredCourse
from ..logic.engine import RecommendationEngine
from .formatting import format_summary
from .links import placeholder_image_url
from .strings import get_string


def _text_only(html: str) -> Dict[str, Any]:
    return {"templates": [{"id": "main", "html": html}]}


def course_clicked_js(wwwroot: str = WWWROOT) -> str:
    base = json.dumps(f"{wwwroot}/course/view.php?id=")
    return (
        "this.courseClicked = function(courseId) { "
        f"window.open({base} + courseId, \"_system\"); "
        "};"
    )


def render_mobile_view(data: Dict[str, Any]) -> str:
    image = escape(data["courseimgurl"], quote=True)
    items = []
    for course in data["courses"]:
        items.append(f"""
    <ion-item button detail="true" (click)="courseClicked({int(course['id'])})">
        <ion-thumbnail slot="start"><img src="{image}" alt=""></ion-thumbnail>
        <ion-label>
            <h2>{escape(course['fullname'])}</h2>
            <p class="c-cat-name">{escape(course['category_name'])}</p>
            <p>{escape(course['formatted_summary'] or '')}</p>
        </ion-label>
    </ion-item>""")
    return f"""
<h3>{escape(data['title'])}</h3>
<ion-list>{''.join(items)}
</ion-list>"""


def build_mobile_data(courses: List[ScoredCourse], lang: Optional[str] = None) -> Dict[str, Any]:
    """Template data; summaries are stripped and cut for small screens."""
    formatted = [
        c.model_copy(update={"formatted_summary": format_summary(c.summary)})
        for c in courses
    ]
    return {
        "courses": [c.model_dump() for c in formatted],
        "title": get_string("recommended_courses", lang),
        "courseimgurl": placeholder_image_url(),
    }


def mobile_block_view(
    viewer: Viewer,
    source: EnrollmentSource,
    lang: Optional[str] = None
) -> Dict[str, Any]:
    """
    Mobile counterpart of the desktop block.

    Returns:
        {"templates": [...]} for the login/empty states, plus "otherdata"
        and "javascript" when there are courses to show
    """
    lang = lang or viewer.lang

    if not viewer.can_receive_recommendations:
        return _text_only(get_string("login_required", lang))

    courses = RecommendationEngine(source).recommend(viewer.user_id)
    if not courses:
        return _text_only(get_string("no_recommendations", lang))

    data = build_mobile_data(courses, lang)
    return {
        "templates": [{"id": "main", "html": render_mobile_view(data)}],
        "otherdata": data,
        "javascript": course_clicked_js(),
    }
