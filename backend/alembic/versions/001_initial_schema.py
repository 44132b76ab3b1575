"""Initial schema: campsites and users.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "campsites",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("name_ja", sa.String(100), nullable=False),
        sa.Column("name_en", sa.String(100), nullable=True),
        sa.Column("lat", sa.Float, nullable=True),
        sa.Column("lng", sa.Float, nullable=True),
        sa.Column("address_ja", sa.String(200), nullable=False),
        sa.Column("address_en", sa.String(200), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("website", sa.String(500), nullable=True),
        sa.Column("price", sa.String(100), nullable=False),
        sa.Column("price_min", sa.Integer, nullable=True),
        sa.Column("price_max", sa.Integer, nullable=True),
        sa.Column("nearest_station_ja", sa.String(100), nullable=False),
        sa.Column("nearest_station_en", sa.String(100), nullable=True),
        sa.Column("access_time_ja", sa.String(100), nullable=False),
        sa.Column("access_time_en", sa.String(100), nullable=True),
        sa.Column("description_ja", sa.Text, nullable=False, server_default=""),
        sa.Column("description_en", sa.Text, nullable=True),
        sa.Column("facilities", sa.JSON, nullable=False),
        sa.Column("activities", sa.JSON, nullable=False),
        sa.Column("images", sa.JSON, nullable=False),
        sa.Column("reservation_url", sa.String(500), nullable=True),
        sa.Column("reservation_phone", sa.String(50), nullable=True),
        sa.Column("reservation_email", sa.String(255), nullable=True),
        sa.Column("check_in_time", sa.String(50), nullable=True),
        sa.Column("check_out_time", sa.String(50), nullable=True),
        sa.Column("cancellation_policy_ja", sa.Text, nullable=True),
        sa.Column("cancellation_policy_en", sa.Text, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_campsites_name_ja", "campsites", ["name_ja"])
    op.create_index("ix_campsites_created_at", "campsites", ["created_at"])

    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, server_default="ADMIN"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)


def downgrade() -> None:
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
    op.drop_index("ix_campsites_created_at", table_name="campsites")
    op.drop_index("ix_campsites_name_ja", table_name="campsites")
    op.drop_table("campsites")
