"""Create bookings and booking_slots

Revision ID: 3b1c9a7d2e40
Revises:
Create Date: 2026-10-18 10:02:11.418203

"""
from alembic import op
import sqlalchemy as sa


revision = "3b1c9a7d2e40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "bookings",
        sa.Column("id", sa.String(length=32), primary_key=True),
        sa.Column("customer_name", sa.String(), nullable=False),
        sa.Column("customer_number", sa.String(), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("event_timing", sa.String(), nullable=False),
        sa.Column("event_type", sa.String(), nullable=False),
        sa.Column("hall_charges", sa.Float(), nullable=False),
        sa.Column("selected_thali", sa.String(), nullable=False),
        sa.Column("thali_price", sa.Float(), nullable=False),
        sa.Column("number_of_people", sa.Integer(), nullable=False),
        sa.Column("items", sa.JSON(), nullable=False),
        sa.Column("catering_total", sa.Float(), nullable=False),
        sa.Column("item_total", sa.Float(), nullable=False),
        sa.Column("total_price", sa.Float(), nullable=False),
        sa.Column("discount", sa.Float(), nullable=False),
        sa.Column("discount_amount", sa.Float(), nullable=False),
        sa.Column("final_price", sa.Float(), nullable=False),
        sa.Column("payment_status", sa.String(), nullable=False, server_default="Pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_bookings_start_date", "bookings", ["start_date"])
    op.create_index("ix_bookings_end_date", "bookings", ["end_date"])
    op.create_index("ix_bookings_event_timing", "bookings", ["event_timing"])

    op.create_table(
        "booking_slots",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "booking_id",
            sa.String(length=32),
            sa.ForeignKey("bookings.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("day", sa.Date(), nullable=False),
        sa.Column("event_timing", sa.String(), nullable=False),
        sa.UniqueConstraint("day", "event_timing", name="uq_booking_slot_day_timing"),
    )
    op.create_index("ix_booking_slots_id", "booking_slots", ["id"])


def downgrade():
    op.drop_index("ix_booking_slots_id", table_name="booking_slots")
    op.drop_table("booking_slots")

    op.drop_index("ix_bookings_event_timing", table_name="bookings")
    op.drop_index("ix_bookings_end_date", table_name="bookings")
    op.drop_index("ix_bookings_start_date", table_name="bookings")
    op.drop_table("bookings")
