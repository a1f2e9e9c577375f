"""Create pet store tables

Revision ID: 001
Revises: None
Create Date: 2024-05-02 00:00:00.000000+00:00

What:  Creates `pet_store`, `employee`, `customer` and the
       `pet_store_customer` join table.

Rollback: downgrade() drops all four tables (destructive, all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "pet_store",
        sa.Column("pet_store_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("pet_store_name", sa.String(60), nullable=True),
        sa.Column("pet_store_address", sa.String(128), nullable=True),
        sa.Column("pet_store_city", sa.String(60), nullable=True),
        sa.Column("pet_store_state", sa.String(60), nullable=True),
        sa.Column("pet_store_zip", sa.String(20), nullable=True),
        sa.Column("pet_store_phone", sa.String(30), nullable=True),
        sa.PrimaryKeyConstraint("pet_store_id"),
    )

    op.create_table(
        "customer",
        sa.Column("customer_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("customer_first_name", sa.String(60), nullable=True),
        sa.Column("customer_last_name", sa.String(60), nullable=True),
        sa.Column("customer_email", sa.String(128), nullable=True),
        sa.PrimaryKeyConstraint("customer_id"),
    )

    # Nullable FK; rows go with their store
    op.create_table(
        "employee",
        sa.Column("employee_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("employee_first_name", sa.String(60), nullable=True),
        sa.Column("employee_last_name", sa.String(60), nullable=True),
        sa.Column("employee_phone", sa.String(30), nullable=True),
        sa.Column("employee_job_title", sa.String(60), nullable=True),
        sa.Column("pet_store_id", sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(
            ["pet_store_id"], ["pet_store.pet_store_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("employee_id"),
    )
    op.create_index("ix_employee_pet_store_id", "employee", ["pet_store_id"])

    # Composite key: one membership per (store, customer) pair
    op.create_table(
        "pet_store_customer",
        sa.Column("pet_store_id", sa.Integer(), nullable=False),
        sa.Column("customer_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["pet_store_id"], ["pet_store.pet_store_id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["customer_id"], ["customer.customer_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("pet_store_id", "customer_id"),
    )


def downgrade() -> None:
    op.drop_table("pet_store_customer")
    op.drop_index("ix_employee_pet_store_id", table_name="employee")
    op.drop_table("employee")
    op.drop_table("customer")
    op.drop_table("pet_store")
