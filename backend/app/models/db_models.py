"""
101 Fixes - SQLAlchemy ORM Models
Persistent storage for subscribers and audit applications
"""
from datetime import datetime, timezone
from enum import Enum
from sqlalchemy import Column, String, DateTime, Boolean
from ..database import Base


# =============================================================================
# ENUMS
# =============================================================================

class ApplicationStatus(str, Enum):
    """Review status of an audit application. Transitions happen outside this service."""
    PENDING = "pending"
    REVIEWED = "reviewed"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class MonthlyAdSpend(str, Enum):
    """Ad spend buckets offered on the audit form."""
    UP_TO_2K = "$0 to $2,000"
    UP_TO_5K = "$2,001 to $5,000"
    UP_TO_10K = "$5,001 to $10,000"
    OVER_10K = "$10,001 and above"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# TABLES
# =============================================================================

class EmailSubscriberDB(Base):
    """An email that asked for (and was granted) access to the fixes."""
    __tablename__ = "email_subscribers"

    id = Column(String(36), primary_key=True)  # UUID
    email = Column(String(320), unique=True, nullable=False, index=True)  # Natural key, stored as given
    subscribed_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    access_granted = Column(Boolean, nullable=False, default=False)


class AuditApplicationDB(Base):
    """Free audit request from the footer form."""
    __tablename__ = "audit_applications"

    id = Column(String(36), primary_key=True)  # UUID
    name = Column(String(255), nullable=False)
    brand = Column(String(255), nullable=False)
    store_url = Column(String(2048), nullable=False)  # Normalized with a scheme
    monthly_ad_spend = Column(String(50), nullable=False)
    email = Column(String(320), nullable=False, index=True)  # Not unique - repeat applications allowed
    submitted_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    status = Column(String(20), nullable=False, default=ApplicationStatus.PENDING.value)
