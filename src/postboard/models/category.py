"""SQLAlchemy model for post categories."""
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from postboard.db.session import Base


class Category(Base):
    """Classification referenced by posts. Read-only from the API's point of view."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
