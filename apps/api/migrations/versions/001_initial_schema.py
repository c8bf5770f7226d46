"""Initial schema for companies and invoices tables"""

revision = "001"
down_revision = None
branch_labels = None
depends_on = None

from alembic import op
import sqlalchemy as sa


def upgrade():
    op.create_table(
        "companies",
        sa.Column("code", sa.String(), primary_key=True, nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
    )

    op.create_table(
        "invoices",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "comp_code",
            sa.String(),
            sa.ForeignKey("companies.code", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("amt", sa.Float(), nullable=False),
        sa.Column("paid", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column(
            "add_date",
            sa.DateTime(),
            nullable=False,
            server_default=sa.func.current_timestamp(),
        ),
        sa.Column("paid_date", sa.DateTime(), nullable=True),
    )


def downgrade():
    op.drop_table("invoices")
    op.drop_table("companies")
