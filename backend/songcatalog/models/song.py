"""Song model."""
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from songcatalog.database import Base


class Song(Base):
    """Song record with lyrics and an external link."""

    __tablename__ = "songs"

    id = Column(Integer, primary_key=True, index=True)
    artist_id = Column(Integer, ForeignKey("artists.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False, index=True)
    release_date = Column(Date, index=True)
    lyrics = Column(Text, nullable=False, default="")
    link = Column(String(1000), nullable=False, default="")

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    artist = relationship("Artist", back_populates="songs")

    def __repr__(self):
        return f"<Song {self.title}>"
