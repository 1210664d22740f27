"""create business and opportunity tables

Businesses a store works with and the discovered places (opportunities)
that may become businesses. Both are removed with their tenant.

Revision ID: d2a6c8e4f1b5
Revises: b7d5f0e3c2a8
Create Date: 2026-10-19 10:42:07.318264

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "d2a6c8e4f1b5"
down_revision: Union[str, Sequence[str], None] = "b7d5f0e3c2a8"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "businesses",
        sa.Column("id", sa.String(length=26), nullable=False),
        sa.Column("tenant_id", sa.String(length=26), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("state", sa.String(length=50), nullable=True),
        sa.Column("zip_code", sa.String(length=20), nullable=True),
        sa.Column("place_id", sa.String(length=255), nullable=True),
        sa.Column("created_by", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["created_by"], ["identities.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_businesses_tenant_id"), "businesses", ["tenant_id"])
    op.create_index(
        "uq_businesses_tenant_id_place_id",
        "businesses",
        ["tenant_id", "place_id"],
        unique=True,
        postgresql_where=sa.text("place_id IS NOT NULL"),
    )

    op.create_table(
        "opportunities",
        sa.Column("id", sa.String(length=26), nullable=False),
        sa.Column("tenant_id", sa.String(length=26), nullable=False),
        sa.Column("place_id", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("city", sa.String(length=100), nullable=True),
        sa.Column("state", sa.String(length=50), nullable=True),
        sa.Column("zip_code", sa.String(length=20), nullable=True),
        sa.Column("status", sa.String(length=16), nullable=False),
        sa.Column("business_id", sa.String(length=26), nullable=True),
        sa.Column("created_by", sa.String(length=255), nullable=False),
        sa.Column("converted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["business_id"], ["businesses.id"], ondelete="SET NULL"
        ),
        sa.ForeignKeyConstraint(
            ["created_by"], ["identities.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "tenant_id", "place_id", name="uq_opportunities_tenant_id_place_id"
        ),
    )
    op.create_index(
        "ix_opportunities_tenant_id_status",
        "opportunities",
        ["tenant_id", "status"],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_opportunities_tenant_id_status", table_name="opportunities")
    op.drop_table("opportunities")
    op.drop_index("uq_businesses_tenant_id_place_id", table_name="businesses")
    op.drop_index(op.f("ix_businesses_tenant_id"), table_name="businesses")
    op.drop_table("businesses")
