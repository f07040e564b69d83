"""create_wedding_site_tables

Revision ID: 3f1c2a7b9d10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1c2a7b9d10"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("now()"),
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "wedding_sites",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        # Publishing
        sa.Column("slug", sa.String(length=255), nullable=True),
        sa.Column("password_hash", sa.String(length=255), nullable=True),
        sa.Column("is_published", sa.Boolean(), nullable=False),
        # Theme
        sa.Column("primary_color", sa.String(length=7), nullable=False),
        sa.Column("secondary_color", sa.String(length=7), nullable=False),
        sa.Column("accent_color", sa.String(length=7), nullable=False),
        sa.Column("heading_font", sa.String(length=100), nullable=False),
        sa.Column("body_font", sa.String(length=100), nullable=False),
        # Hero
        sa.Column("hero_enabled", sa.Boolean(), nullable=False),
        sa.Column("bride_name", sa.String(length=255), nullable=True),
        sa.Column("groom_name", sa.String(length=255), nullable=True),
        sa.Column("wedding_date", sa.Date(), nullable=True),
        sa.Column("hero_image_url", sa.String(length=1024), nullable=True),
        # Story
        sa.Column("story_enabled", sa.Boolean(), nullable=False),
        sa.Column("story_title", sa.String(length=255), nullable=True),
        sa.Column("story_text", sa.Text(), nullable=True),
        sa.Column("story_image1_url", sa.String(length=1024), nullable=True),
        sa.Column("story_image2_url", sa.String(length=1024), nullable=True),
        # Gallery
        sa.Column("gallery_enabled", sa.Boolean(), nullable=False),
        sa.Column("gallery_title", sa.String(length=255), nullable=True),
        sa.Column("gallery_images", sa.JSON(), nullable=False),
        # Registry
        sa.Column("registry_enabled", sa.Boolean(), nullable=False),
        sa.Column("registry_title", sa.String(length=255), nullable=True),
        sa.Column("registry_text", sa.Text(), nullable=True),
        # Music
        sa.Column("music_enabled", sa.Boolean(), nullable=False),
        sa.Column("music_url", sa.String(length=1024), nullable=True),
        sa.Column("music_title", sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["user_id"], ["users.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_wedding_sites_user_id", "wedding_sites", ["user_id"], unique=True)
    op.create_index("ix_wedding_sites_slug", "wedding_sites", ["slug"], unique=True)

    op.create_table(
        "events",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("site_id", sa.UUID(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("time", sa.String(length=50), nullable=False),
        sa.Column("location", sa.String(length=255), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["site_id"], ["wedding_sites.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_events_site_id", "events", ["site_id"])

    op.create_table(
        "rsvps",
        sa.Column("uuid", sa.UUID(), nullable=False),
        sa.Column("site_id", sa.UUID(), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("attending", sa.Boolean(), nullable=False),
        sa.Column("dietary_restrictions", sa.Text(), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["site_id"], ["wedding_sites.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index("ix_rsvps_site_id", "rsvps", ["site_id"])


def downgrade() -> None:
    op.drop_index("ix_rsvps_site_id", table_name="rsvps")
    op.drop_table("rsvps")
    op.drop_index("ix_events_site_id", table_name="events")
    op.drop_table("events")
    op.drop_index("ix_wedding_sites_slug", table_name="wedding_sites")
    op.drop_index("ix_wedding_sites_user_id", table_name="wedding_sites")
    op.drop_table("wedding_sites")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
