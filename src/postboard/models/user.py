"""SQLAlchemy model for post owners."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from postboard.db.session import Base


class User(Base):
    """Account that owns posts.

    Accounts are provisioned outside this service; rows here only back the
    ``posts.user_id`` foreign key and bearer-token lookups.
    """

    __tablename__ = "user_account"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
