from sqlalchemy import Column, Integer, BigInteger, String, SmallInteger
from db import Base
from course_recommendation.config import DB_TABLE_PREFIX, GUEST_USERNAME

class User(Base):
    __tablename__ = f"{DB_TABLE_PREFIX}user"
    __table_args__ = {'extend_existing': True}
    id = Column(BigInteger().with_variant(Integer, "sqlite"), primary_key=True)
    username = Column(String(100), unique=True, index=True, nullable=False)
    email = Column(String(100), nullable=False, default="")
    firstname = Column(String(100), nullable=False, default="")
    lastname = Column(String(100), nullable=False, default="")
    lang = Column(String(30), nullable=False, default="en")
    deleted = Column(SmallInteger, nullable=False, default=0)
    suspended = Column(SmallInteger, nullable=False, default=0)

    @property
    def is_guest(self) -> bool:
        return self.username == GUEST_USERNAME

    @property
    def is_active(self) -> bool:
        return not self.deleted and not self.suspended
