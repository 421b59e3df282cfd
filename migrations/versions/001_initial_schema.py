"""Rooms and bookings tables.

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

from alembic import op


revision = "001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    conn = op.get_bind()
    conn.exec_driver_sql(
        """
        CREATE TABLE rooms (
            id          SERIAL PRIMARY KEY,
            description TEXT NOT NULL DEFAULT ''
        );

        CREATE TABLE bookings (
            id          SERIAL PRIMARY KEY,
            room_id     INTEGER NOT NULL REFERENCES rooms(id),
            customer_id INTEGER NULL,
            start_date  DATE NOT NULL,
            end_date    DATE NOT NULL,
            is_active   BOOLEAN NOT NULL DEFAULT TRUE,
            CONSTRAINT bookings_date_order CHECK (start_date <= end_date)
        );

        CREATE INDEX idx_bookings_room_id ON bookings (room_id);
        """
    )


def downgrade() -> None:
    conn = op.get_bind()
    conn.exec_driver_sql("DROP TABLE IF EXISTS bookings;")
    conn.exec_driver_sql("DROP TABLE IF EXISTS rooms;")
