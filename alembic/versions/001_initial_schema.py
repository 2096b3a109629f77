"""Initial database schema.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Creates the tables the booking API reads and writes:
- Profiles (rows owned by the identity provider's signup flow)
- Services
- Bookings
"""

from typing import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

# revision identifiers
revision: str = "001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create all database tables."""

    # ==================== PROFILES ====================
    op.create_table(
        "profiles",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(255), unique=True, index=True),
        sa.Column("full_name", sa.String(150)),
        sa.Column("avatar_url", sa.Text),
        sa.Column("role", sa.String(10), nullable=False, server_default="buyer"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint("role IN ('buyer', 'seller', 'both')", name="ck_profiles_role"),
    )

    # ==================== SERVICES ====================
    op.create_table(
        "services",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("title", sa.String(150), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("category", sa.String(30), nullable=False, index=True),
        sa.Column("portfolio", sa.Text),
        sa.Column("default_price", sa.Numeric(10, 2)),
        sa.Column("default_delivery_time", sa.String(50)),
        sa.Column("express_price", sa.Numeric(10, 2)),
        sa.Column("express_delivery_time", sa.String(50)),
        sa.Column("is_active", sa.Boolean, server_default=sa.true(), index=True),
        sa.Column("is_verified", sa.Boolean, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # ==================== BOOKINGS ====================
    op.create_table(
        "bookings",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("buyer_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("profiles.id"), nullable=False, index=True),
        sa.Column("service_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("services.id"), nullable=False, index=True),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("time", sa.String(8), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending", index=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), index=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'completed', 'cancelled')",
            name="ck_bookings_status",
        ),
    )


def downgrade() -> None:
    """Drop all database tables in reverse order."""
    op.drop_table("bookings")
    op.drop_table("services")
    op.drop_table("profiles")
