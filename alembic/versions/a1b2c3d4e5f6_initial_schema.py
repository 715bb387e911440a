"""initial schema with row level security

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2025-01-20 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CONTENT_TABLES = ('artists', 'music_releases', 'events', 'promo_slides')


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # Identity tables
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=True),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        sa.Column('last_login', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'user_roles',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('role', sa.String(20), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'role', name='unique_user_role'),
        sa.CheckConstraint("role IN ('admin', 'user')", name='ck_user_roles_role'),
    )
    op.create_index('ix_user_roles_user_id', 'user_roles', ['user_id'])

    # Content tables
    op.create_table(
        'artists',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(255), nullable=False),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('short_bio', sa.String(500), nullable=True),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('genre', sa.String(100), nullable=True),
        sa.Column('spotify_url', sa.String(500), nullable=True),
        sa.Column('soundcloud_url', sa.String(500), nullable=True),
        sa.Column('instagram_url', sa.String(500), nullable=True),
        sa.Column('youtube_url', sa.String(500), nullable=True),
        sa.Column('is_featured', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_artists_slug', 'artists', ['slug'], unique=True)

    op.create_table(
        'music_releases',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('artist_id', sa.Uuid(), nullable=True),
        sa.Column('artist_name', sa.String(255), nullable=False),
        sa.Column('cover_url', sa.String(500), nullable=True),
        sa.Column('release_date', sa.Date(), server_default=sa.func.current_date(), nullable=False),
        sa.Column('genre', sa.String(100), nullable=True),
        sa.Column('spotify_url', sa.String(500), nullable=True),
        sa.Column('apple_music_url', sa.String(500), nullable=True),
        sa.Column('soundcloud_url', sa.String(500), nullable=True),
        sa.Column('download_url', sa.String(500), nullable=True),
        sa.Column('is_featured', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['artist_id'], ['artists.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_music_releases_artist_id', 'music_releases', ['artist_id'])
    op.create_index('ix_music_releases_genre', 'music_releases', ['genre'])

    op.create_table(
        'events',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('venue', sa.String(255), nullable=False),
        sa.Column('location', sa.String(255), nullable=False),
        sa.Column('event_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('image_url', sa.String(500), nullable=True),
        sa.Column('ticket_url', sa.String(500), nullable=True),
        sa.Column('ticket_price', sa.String(100), nullable=True),
        sa.Column('is_featured', sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_events_event_date', 'events', ['event_date'])

    op.create_table(
        'promo_slides',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('image_url', sa.String(500), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('subtitle', sa.String(500), nullable=True),
        sa.Column('link', sa.String(500), nullable=True),
        sa.Column('position', sa.String(10), server_default='both', nullable=False),
        sa.Column('display_order', sa.Integer(), server_default='0', nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("position IN ('top', 'bottom', 'both')", name='ck_promo_slides_position'),
    )

    op.create_table(
        'demo_submissions',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('artist_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('genre', sa.String(50), nullable=False),
        sa.Column('music_link', sa.String(500), nullable=False),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('social_link', sa.String(500), nullable=True),
        sa.Column('status', sa.String(20), server_default='pending', nullable=False),
        sa.Column('admin_notes', sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint(
            "status IN ('pending', 'reviewed', 'accepted', 'rejected')",
            name='ck_demo_submissions_status',
        ),
    )
    op.create_index('ix_demo_submissions_status', 'demo_submissions', ['status'])

    # Caller identity, set per transaction by the API
    op.execute("""
        CREATE OR REPLACE FUNCTION public.current_app_user()
        RETURNS uuid
        LANGUAGE sql
        STABLE
        AS $$
            SELECT NULLIF(current_setting('app.current_user_id', true), '')::uuid
        $$
    """)

    # Runs as owner so policies can consult user_roles without recursing into its own policy
    op.execute("""
        CREATE OR REPLACE FUNCTION public.has_role(_user_id uuid, _role text)
        RETURNS boolean
        LANGUAGE sql
        STABLE
        SECURITY DEFINER
        SET search_path = public
        AS $$
            SELECT EXISTS (
                SELECT 1 FROM public.user_roles
                WHERE user_id = _user_id AND role = _role
            )
        $$
    """)

    is_admin = "public.has_role(public.current_app_user(), 'admin')"

    for table in CONTENT_TABLES:
        op.execute(f"ALTER TABLE {table} ENABLE ROW LEVEL SECURITY")
        op.execute(f"ALTER TABLE {table} FORCE ROW LEVEL SECURITY")
        op.execute(f"CREATE POLICY {table}_public_select ON {table} FOR SELECT USING (is_active = true)")
        op.execute(f"CREATE POLICY {table}_admin_select ON {table} FOR SELECT USING ({is_admin})")
        op.execute(f"CREATE POLICY {table}_admin_insert ON {table} FOR INSERT WITH CHECK ({is_admin})")
        op.execute(f"CREATE POLICY {table}_admin_update ON {table} FOR UPDATE USING ({is_admin}) WITH CHECK ({is_admin})")
        op.execute(f"CREATE POLICY {table}_admin_delete ON {table} FOR DELETE USING ({is_admin})")

    # Anyone may submit a demo, but only as pending; nobody but admins can read them back
    op.execute("ALTER TABLE demo_submissions ENABLE ROW LEVEL SECURITY")
    op.execute("ALTER TABLE demo_submissions FORCE ROW LEVEL SECURITY")
    op.execute("CREATE POLICY demo_submissions_public_insert ON demo_submissions FOR INSERT WITH CHECK (status = 'pending')")
    op.execute(f"CREATE POLICY demo_submissions_admin_select ON demo_submissions FOR SELECT USING ({is_admin})")
    op.execute(f"CREATE POLICY demo_submissions_admin_update ON demo_submissions FOR UPDATE USING ({is_admin}) WITH CHECK ({is_admin})")
    op.execute(f"CREATE POLICY demo_submissions_admin_delete ON demo_submissions FOR DELETE USING ({is_admin})")

    # Not forced: the table owner still provisions roles
    op.execute("ALTER TABLE user_roles ENABLE ROW LEVEL SECURITY")
    op.execute(
        "CREATE POLICY user_roles_select ON user_roles FOR SELECT "
        f"USING (user_id = public.current_app_user() OR {is_admin})"
    )


def downgrade() -> None:
    op.drop_index('ix_demo_submissions_status', table_name='demo_submissions')
    op.drop_table('demo_submissions')
    op.drop_table('promo_slides')
    op.drop_index('ix_events_event_date', table_name='events')
    op.drop_table('events')
    op.drop_index('ix_music_releases_genre', table_name='music_releases')
    op.drop_index('ix_music_releases_artist_id', table_name='music_releases')
    op.drop_table('music_releases')
    op.drop_index('ix_artists_slug', table_name='artists')
    op.drop_table('artists')
    op.drop_index('ix_user_roles_user_id', table_name='user_roles')
    op.drop_table('user_roles')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')

    op.execute("DROP FUNCTION IF EXISTS public.has_role(uuid, text)")
    op.execute("DROP FUNCTION IF EXISTS public.current_app_user()")
