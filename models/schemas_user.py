from pydantic import BaseModel

class Viewer(BaseModel):
    """The visitor asking for the block, as resolved from the request."""
    user_id: int | None = None
    username: str | None = None
    lang: str | None = None
    is_logged_in: bool = False
    is_guest: bool = False

    class Config:
        from_attributes = True

    @property
    def can_receive_recommendations(self) -> bool:
        return self.is_logged_in and not self.is_guest and self.user_id is not None
