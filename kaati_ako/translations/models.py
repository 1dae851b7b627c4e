from sqlalchemy import Column, ForeignKey, Integer, Text

from kaati_ako.database import Base


class TranslationTable(Base):
    """Table of a card's text in one language."""

    __tablename__ = "translation"

    id = Column(Integer, primary_key=True, autoincrement=True)
    card_id = Column(Integer, ForeignKey("card.id"))
    language_id = Column(Integer, ForeignKey("language.id"))
    text = Column(Text)
    description = Column(Text)  # empty string when there is none

    def __repr__(self):
        return (
            f"<TranslationTable(id={self.id}, card_id={self.card_id}, "
            f"language_id={self.language_id}, text='{self.text}')>"
        )
