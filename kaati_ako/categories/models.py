from sqlalchemy import Column, Integer, Text

from kaati_ako.database import Base


class CategoryTable(Base):
    """Table of flash card categories."""

    __tablename__ = "category"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text)

    def __repr__(self):
        return f"<CategoryTable(id={self.id}, name='{self.name}')>"
