"""
Migration: Initial complaint intake schema

This migration creates:
- citizens: complainants keyed (non-uniquely) by 16-digit ID number
- complaints: status-tracked reports linked to a citizen
- photos: stored photo file names or inline data: URIs per complaint
- admins: administrator accounts with bcrypt password hashes
- validations: admin validation records per complaint
"""

from alembic import op
import sqlalchemy as sa

# Revision identifiers
revision = '0f3a6c2d1b7e'
down_revision = None
branch_labels = None
depends_on = None

complaint_status = sa.Enum(
    'pending', 'in-progress', 'completed', 'rejected',
    name='complaint_status'
)


def upgrade():
    op.create_table(
        'citizens',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('id_number', sa.String(length=16), nullable=True),
        sa.Column('phone', sa.String(length=20), nullable=True),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    # Not unique: concurrent submissions may register the same ID number twice
    op.create_index('ix_citizens_id_number', 'citizens', ['id_number'])

    op.create_table(
        'admins',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=120), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('last_login', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_admins_email', 'admins', ['email'], unique=True)

    op.create_table(
        'complaints',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('citizen_id', sa.Integer(), sa.ForeignKey('citizens.id'), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('location', sa.String(length=255), nullable=False),
        sa.Column('status', complaint_status, nullable=False, server_default='pending'),
        sa.Column('response', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_complaints_citizen_id', 'complaints', ['citizen_id'])
    op.create_index('ix_complaints_created_at', 'complaints', ['created_at'])

    op.create_table(
        'photos',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('complaint_id', sa.Integer(), sa.ForeignKey('complaints.id'), nullable=False),
        sa.Column('citizen_id', sa.Integer(), sa.ForeignKey('citizens.id'), nullable=False),
        sa.Column('file', sa.Text(), nullable=False),
        sa.Column('captured_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_photos_complaint_id', 'photos', ['complaint_id'])

    op.create_table(
        'validations',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('complaint_id', sa.Integer(), sa.ForeignKey('complaints.id'), nullable=False),
        sa.Column('admin_id', sa.Integer(), sa.ForeignKey('admins.id'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_validations_complaint_id', 'validations', ['complaint_id'])


def downgrade():
    op.drop_index('ix_validations_complaint_id', table_name='validations')
    op.drop_table('validations')

    op.drop_index('ix_photos_complaint_id', table_name='photos')
    op.drop_table('photos')

    op.drop_index('ix_complaints_created_at', table_name='complaints')
    op.drop_index('ix_complaints_citizen_id', table_name='complaints')
    op.drop_table('complaints')
    complaint_status.drop(op.get_bind(), checkfirst=True)

    op.drop_index('ix_admins_email', table_name='admins')
    op.drop_table('admins')

    op.drop_index('ix_citizens_id_number', table_name='citizens')
    op.drop_table('citizens')
