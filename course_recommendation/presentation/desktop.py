"""
Desktop dashboard block

Renders recommended courses as a deck of course cards and decides which
of the three block states (login required, nothing to recommend, courses)
the visitor sees.
"""

from html import escape
from typing import List, Optional

from models.schemas_user import Viewer
from ..logic.adapter import EnrollmentSource
from ..logic.contracts import BlockContent, ScoredCourse
from ..logic.engine import RecommendationEngine
from .links import course_url, placeholder_image_url
from .strings import get_string


def render_course_card(course: ScoredCourse, image_url: Optional[str]) -> str:
    image = escape(image_url or placeholder_image_url(), quote=True)
    link = escape(course_url(course.id), quote=True)
    return f"""
      <a class="card dashboard-card" href="{link}">
        <div class="card-img dashboard-card-img" style='background-image: url("{image}");'></div>
        <div class="card-body pr-1 course-info-container c-card-cont">
            <p class="c-name">{escape(course.fullname)}</p>
            <p class="c-cat-name">{escape(course.category_name)}</p>
        </div>
      </a>"""


def render_block(courses: List[ScoredCourse], images=None) -> str:
    """
    Render the card deck.

    Args:
        courses: Ranked recommendations
        images: Object with get_image_url(course_id); None uses the placeholder for every card

    Returns:
        HTML fragment
    """
    cards = "".join(
        render_course_card(c, images.get_image_url(c.id) if images is not None else None)
        for c in courses
    )
    return f"""
<div class="card-deck dashboard-card-deck">{cards}
</div>"""


def block_content(
    viewer: Viewer,
    source: EnrollmentSource,
    images=None,
    lang: Optional[str] = None
) -> BlockContent:
    """
    Build the block for the current visitor.

    Guests and anonymous visitors get the login prompt; users with nothing
    to recommend get the empty-state message.
    """
    lang = lang or viewer.lang
    title = get_string("pluginname", lang)

    if not viewer.can_receive_recommendations:
        return BlockContent(title=title, text=get_string("login_required", lang))

    courses = RecommendationEngine(source).recommend(viewer.user_id)
    if not courses:
        return BlockContent(title=title, text=get_string("no_recommendations", lang))

    return BlockContent(title=title, text=render_block(courses, images))
