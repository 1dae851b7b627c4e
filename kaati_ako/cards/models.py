from sqlalchemy import Column, ForeignKey, Integer

from kaati_ako.database import Base


class CardTable(Base):
    """Table of flash cards."""

    __tablename__ = "card"

    id = Column(Integer, primary_key=True, autoincrement=True)
    category_id = Column(Integer, ForeignKey("category.id"))

    def __repr__(self):
        return f"<CardTable(id={self.id}, category_id={self.category_id})>"
