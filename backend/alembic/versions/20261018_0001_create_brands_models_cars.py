"""create brands, models and cars tables

Revision ID: 20261018_0001
Revises:
Create Date: 2026-10-18 09:30:00
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261018_0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _ensure_index(bind, table: str, name: str, columns: list[str]) -> None:
    existing = {index["name"] for index in sa.inspect(bind).get_indexes(table)}
    if name not in existing:
        op.create_index(name, table, columns, unique=False)


def upgrade() -> None:
    bind = op.get_bind()
    inspector = sa.inspect(bind)
    existing_tables = set(inspector.get_table_names())

    if "brands" not in existing_tables:
        op.create_table(
            "brands",
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("name", sa.String(length=100), nullable=False),
            *_timestamps(),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint("name"),
        )
    _ensure_index(bind, "brands", "ix_brands_id", ["id"])

    if "models" not in existing_tables:
        op.create_table(
            "models",
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("name", sa.String(length=100), nullable=False),
            sa.Column("brand_id", sa.Integer(), nullable=False),
            sa.Column("fipe_value", sa.Float(), nullable=False),
            *_timestamps(),
            sa.ForeignKeyConstraint(["brand_id"], ["brands.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id"),
            sa.UniqueConstraint("name"),
        )
    _ensure_index(bind, "models", "ix_models_id", ["id"])
    _ensure_index(bind, "models", "ix_models_brand_id", ["brand_id"])

    if "cars" not in existing_tables:
        op.create_table(
            "cars",
            sa.Column("id", sa.Integer(), nullable=False),
            sa.Column("color", sa.String(length=30), nullable=False),
            sa.Column("year", sa.Integer(), nullable=False),
            sa.Column("number_of_ports", sa.Integer(), nullable=False),
            sa.Column("fuel", sa.String(length=30), nullable=False),
            sa.Column("value", sa.Float(), nullable=False),
            sa.Column("model_id", sa.Integer(), nullable=False),
            *_timestamps(),
            sa.ForeignKeyConstraint(["model_id"], ["models.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id"),
        )
    _ensure_index(bind, "cars", "ix_cars_id", ["id"])
    _ensure_index(bind, "cars", "ix_cars_year", ["year"])
    _ensure_index(bind, "cars", "ix_cars_model_id", ["model_id"])


def downgrade() -> None:
    op.drop_index("ix_cars_model_id", table_name="cars")
    op.drop_index("ix_cars_year", table_name="cars")
    op.drop_index("ix_cars_id", table_name="cars")
    op.drop_table("cars")
    op.drop_index("ix_models_brand_id", table_name="models")
    op.drop_index("ix_models_id", table_name="models")
    op.drop_table("models")
    op.drop_index("ix_brands_id", table_name="brands")
    op.drop_table("brands")
