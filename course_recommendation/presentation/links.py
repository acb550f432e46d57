from urllib.parse import urlencode

from ..config import WWWROOT


def course_url(course_id: int, wwwroot: str = WWWROOT) -> str:
    return f"{wwwroot}/course/view.php?{urlencode({'id': course_id})}"


def placeholder_image_url(wwwroot: str = WWWROOT) -> str:
    """Theme image shown for courses without an overview image."""
    return f"{wwwroot}/theme/image.php?theme=boost&component=core&image=i/course"
