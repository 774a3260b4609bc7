"""User model."""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from app.database import Base


class User(Base):
    """
    Application user as issued by the identity provider.

    The id is the provider's string identifier; this service only
    references users, it never creates or updates them.
    """

    __tablename__ = "users"

    id = Column(String(450), primary_key=True)
    user_name = Column(String(256), nullable=True, index=True)
    email = Column(String(256), nullable=True)

    # Relationships
    organised_events = relationship("Event", back_populates="organiser")
    joined_events = relationship(
        "EventParticipant",
        back_populates="helper",
        cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<User(id={self.id}, user_name={self.user_name})>"
