"""create invitations table

At most one pending invitation per (email, tenant). Accepted rows are kept
as history, so uniqueness is enforced by a partial index.

Revision ID: 8c4e2d6a1b93
Revises: 3f1a9c2b7d10
Create Date: 2026-09-28 10:41:57.902114

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "8c4e2d6a1b93"
down_revision: Union[str, Sequence[str], None] = "3f1a9c2b7d10"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PENDING_INDEX = "uq_invitations_pending_email_tenant"


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "invitations",
        sa.Column("id", sa.String(length=26), nullable=False),  # ULID
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("tenant_id", sa.String(length=26), nullable=False),
        sa.Column("can_edit", sa.Boolean(), nullable=False),
        sa.Column("is_global_admin", sa.Boolean(), nullable=False),
        sa.Column("invited_by", sa.String(length=255), nullable=False),
        sa.Column("invited_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "status",
            sa.String(length=16),
            server_default="pending",
            nullable=False,
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted')", name="ck_invitations_status"
        ),
        sa.ForeignKeyConstraint(["tenant_id"], ["tenants.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["invited_by"], ["identities.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_invitations_tenant_id"), "invitations", ["tenant_id"])
    op.create_index(
        "ix_invitations_email_status", "invitations", ["email", "status"]
    )
    op.create_index(
        PENDING_INDEX,
        "invitations",
        ["email", "tenant_id"],
        unique=True,
        postgresql_where=sa.text("status = 'pending'"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(PENDING_INDEX, table_name="invitations")
    op.drop_index("ix_invitations_email_status", table_name="invitations")
    op.drop_index(op.f("ix_invitations_tenant_id"), table_name="invitations")
    op.drop_table("invitations")
