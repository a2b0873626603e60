"""Artist model."""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from songcatalog.database import Base


class Artist(Base):
    """Performing group referenced by one or more songs."""

    __tablename__ = "artists"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)
    # Lower-cased name; lookups by name go through this column
    normalized_name = Column(String(255), nullable=False, unique=True, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    songs = relationship("Song", back_populates="artist", lazy="dynamic")

    def __repr__(self):
        return f"<Artist {self.name}>"
