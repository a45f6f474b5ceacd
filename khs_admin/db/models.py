"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import JSON, Boolean, Column, Date, Integer, String
from sqlalchemy.sql import func

from khs_admin.infrastructure.database.base import Base, UTCDateTime


def generate_uuid() -> str:
    return str(uuid.uuid4())


class GiftCard(Base):
    __tablename__ = "gift_cards"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    code = Column(String(32), unique=True, nullable=False, index=True)
    original_value_cents = Column(Integer, nullable=False)
    current_balance_cents = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, default="active", index=True)  # active, inactive, expired
    purchase_date = Column(Date, nullable=False)
    expiry_date = Column(Date, nullable=True)
    last_used_date = Column(Date, nullable=True)
    purchaser = Column(String(100), nullable=False)
    recipient = Column(String(100), nullable=False)
    created_at = Column(UTCDateTime(), server_default=func.now(), index=True)


class Payment(Base):
    __tablename__ = "payments"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    client = Column(String(100), nullable=False)
    business = Column(String(100), nullable=False)
    amount_cents = Column(Integer, nullable=False)
    fee_cents = Column(Integer, nullable=True)
    refund_type = Column(String(20), nullable=True)
    status = Column(String(20), nullable=False, default="completed")
    created_at = Column(UTCDateTime(), server_default=func.now(), index=True)


class Withdrawal(Base):
    __tablename__ = "withdrawals"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    business_name = Column(String(100), nullable=False)
    amount_cents = Column(Integer, nullable=False)
    current_balance_cents = Column(Integer, nullable=False, default=0)
    status = Column(String(20), nullable=False, default="Pending", index=True)
    created_at = Column(UTCDateTime(), server_default=func.now(), index=True)


class ModerationSettings(Base):
    __tablename__ = "moderation_settings"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    banned_words = Column(JSON, nullable=False, default=list)
    auto_flag_reviews = Column(Boolean, nullable=False, default=False)
    notify_admin = Column(Boolean, nullable=False, default=True)
    review_flag_threshold = Column(Integer, nullable=True)
    updated_at = Column(UTCDateTime(), server_default=func.now(), onupdate=func.now())
