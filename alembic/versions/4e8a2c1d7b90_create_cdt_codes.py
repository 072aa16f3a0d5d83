"""Create cdt_codes reference table.

Revision ID: 4e8a2c1d7b90
Revises:
Create Date: 2026-10-17

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "4e8a2c1d7b90"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "cdt_codes",
        sa.Column("code", sa.String(length=5), primary_key=True),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("category", sa.String(length=64), nullable=True),
    )
    op.create_index("ix_cdt_codes_code", "cdt_codes", ["code"], unique=False)
    op.create_index("ix_cdt_codes_category", "cdt_codes", ["category"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_cdt_codes_category", table_name="cdt_codes")
    op.drop_index("ix_cdt_codes_code", table_name="cdt_codes")
    op.drop_table("cdt_codes")
