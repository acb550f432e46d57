from sqlalchemy.orm import Session
from sqlalchemy import select
from models.models_user import User
from models.schemas_user import Viewer

def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.execute(select(User).where(User.id == user_id)).scalar_one_or_none()

def viewer_for_user(user: User | None) -> Viewer:
    # deleted or suspended accounts are treated as not logged in
    if user is None or not user.is_active:
        return Viewer()
    return Viewer(
        user_id=user.id,
        username=user.username,
        lang=user.lang,
        is_logged_in=True,
        is_guest=user.is_guest,
    )
