from sqlalchemy import Column, Integer, Text

from kaati_ako.database import Base


class LanguageTable(Base):
    """Table of the languages translations are made in."""

    __tablename__ = "language"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(Text)  # "to", "en", "de"
    name = Column(Text)

    def __repr__(self):
        return f"<LanguageTable(id={self.id}, code='{self.code}', name='{self.name}')>"
