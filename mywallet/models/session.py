"""
mywallet/models/session.py

A LoginSession binds an opaque bearer token to the user it authenticates.
Rows are created at sign-in and looked up by exact token match on every
protected request. A user may hold any number of sessions at once.
"""

from datetime import datetime, timezone
from sqlalchemy import Column, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from mywallet.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class LoginSession(Base):
    __tablename__ = "login_sessions"

    # The bearer token itself is the primary key (exact-match lookup)
    token = Column(String(64), primary_key=True)

    # Reference to the authenticated user (not unique: many sessions per user)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)

    # Recorded so that expiry can be enforced later without a schema change
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow)

    user = relationship("User", back_populates="sessions")

    def __repr__(self):
        return f"<LoginSession(user_id={self.user_id}, created_at={self.created_at})>"
