"""initial trade inspection schema

Revision ID: trade_inspection_001
Revises:
Create Date: 2026-10-18 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'trade_inspection_001'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=False),
        sa.Column('last_name', sa.String(), nullable=False),
        sa.Column('role', sa.Enum('ADMIN', 'CUSTOMER', name='userrole'), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'customers',
        sa.Column('customer_id', sa.String(), primary_key=True),
        sa.Column('country_code', sa.String(3), nullable=False),
        sa.Column('full_name', sa.String(), nullable=False),
        sa.Column('email_address', sa.String(), nullable=False),
        sa.Column('mobile_number', sa.String(20), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('trade_license_or_legal_document_photo_url', sa.String(), nullable=True),
        sa.Column('certificate_photo_url', sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_customers_full_name', 'customers', ['full_name'])
    op.create_index('ix_customers_email_address', 'customers', ['email_address'], unique=True)
    op.create_index('ix_customers_mobile_number', 'customers', ['mobile_number'], unique=True)

    op.create_table(
        'indian_inspectors',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('indian_inspector_id', sa.String(), nullable=False, unique=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('mobile_number', sa.String(20), nullable=False),
        sa.Column('email_id', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('address', sa.Text(), nullable=False),
        sa.Column('commodity_name', sa.String(255), nullable=False),
        sa.Column('experience', sa.String(100), nullable=False),
        sa.Column('aadhar_card_url', sa.String(500), nullable=True),
        sa.Column('bank_account_number', sa.String(50), nullable=False),
        sa.Column('bank_name', sa.String(255), nullable=False),
        sa.Column('ifsc_code', sa.String(20), nullable=False),
        sa.Column('country_code', sa.String(10), nullable=False, server_default='+91'),
        sa.Column('user_id', sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_indian_inspectors_name', 'indian_inspectors', ['name'])
    op.create_index('ix_indian_inspectors_email_id', 'indian_inspectors', ['email_id'], unique=True)

    op.create_table(
        'international_inspectors',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('country_code', sa.String(10), nullable=False),
        sa.Column('full_name', sa.String(255), nullable=False),
        sa.Column('email_address', sa.String(255), nullable=False),
        sa.Column('mobile_number', sa.String(50), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('international_inspector_code', sa.String(100), nullable=False),
        sa.Column('commodity_name', sa.String(255), nullable=True),
        sa.Column('experience_years', sa.Integer(), nullable=True),
        sa.Column('file_paths', sa.Text(), nullable=True),
        sa.Column('bank_account_number', sa.String(100), nullable=True),
        sa.Column('bank_details', sa.Text(), nullable=True),
        sa.Column('trade_license_or_legal_document_photo_url', sa.String(500), nullable=True),
        sa.Column('certificate_photo_url', sa.String(500), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_international_inspectors_full_name', 'international_inspectors', ['full_name'])
    op.create_index(
        'ix_international_inspectors_email_address', 'international_inspectors', ['email_address'], unique=True
    )
    op.create_index(
        'ix_international_inspectors_international_inspector_code',
        'international_inspectors', ['international_inspector_code'], unique=True
    )

    op.create_table(
        'indian_companies',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('company_name', sa.String(255), nullable=False),
        sa.Column('office_number', sa.String(50), nullable=True),
        sa.Column('registered_address', sa.Text(), nullable=True),
        sa.Column('document_paths', sa.JSON(), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('bank_account_number', sa.String(50), nullable=True),
        sa.Column('bank_name', sa.String(255), nullable=True),
        sa.Column('ifsc_code', sa.String(20), nullable=True),
        sa.Column('representative_name', sa.String(255), nullable=True),
        sa.Column('contact_number', sa.String(50), nullable=True),
        sa.Column('email_address', sa.String(255), nullable=False),
        sa.Column('government_id_paths', sa.JSON(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_indian_companies_email_address', 'indian_companies', ['email_address'], unique=True)
    op.create_index('ix_indian_companies_created_at', 'indian_companies', ['created_at'])

    op.create_table(
        'international_companies',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('company_name', sa.String(255), nullable=False),
        sa.Column('office_number', sa.String(50), nullable=True),
        sa.Column('registered_address', sa.Text(), nullable=True),
        sa.Column('document_urls', sa.JSON(), nullable=False),
        sa.Column('certificate_paths', sa.JSON(), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('email_address', sa.String(255), nullable=False),
        sa.Column('bank_account_number', sa.String(255), nullable=True),
        sa.Column('bank_name', sa.String(255), nullable=True),
        sa.Column('ifsc_code', sa.String(50), nullable=True),
        sa.Column('swift_code', sa.String(50), nullable=True),
        sa.Column('government_id_path', sa.String(500), nullable=True),
        *_timestamps(),
    )
    op.create_index(
        'ix_international_companies_email_address', 'international_companies', ['email_address'], unique=True
    )
    op.create_index('ix_international_companies_created_at', 'international_companies', ['created_at'])

    op.create_table(
        'physical_inspection_params',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('broken', sa.Float(), nullable=False),
        sa.Column('purity', sa.Float(), nullable=False),
        sa.Column('yellow_kernel', sa.Float(), nullable=False),
        sa.Column('damage_kernel', sa.Float(), nullable=False),
        sa.Column('red_kernel', sa.Float(), nullable=False),
        sa.Column('paddy_kernel', sa.Float(), nullable=False),
        sa.Column('chalky_rice', sa.Float(), nullable=False),
        sa.Column('live_insects', sa.Float(), nullable=False),
        sa.Column('milling_degree', sa.String(20), nullable=False),
        sa.Column('average_grain_length', sa.Float(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_physical_inspection_params_created_at', 'physical_inspection_params', ['created_at'])

    op.create_table(
        'chemical_inspection_params',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('parameter_name', sa.String(255), nullable=False),
        sa.Column('min_value', sa.Float(), nullable=True),
        sa.Column('max_value', sa.Float(), nullable=True),
        sa.Column('unit', sa.String(50), nullable=True),
        *_timestamps(),
    )
    op.create_index(
        'ix_chemical_inspection_params_parameter_name', 'chemical_inspection_params', ['parameter_name'], unique=True
    )

    op.create_table(
        'raise_enquiries',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('inspection_location', sa.String(), nullable=False),
        sa.Column('country', sa.String(), nullable=False),
        sa.Column('urgency_level', sa.String(20), nullable=False),
        sa.Column('commodity_category', sa.String(), nullable=False),
        sa.Column('sub_commodity', sa.String(), nullable=True),
        sa.Column('rice_type', sa.String(), nullable=True),
        sa.Column('volume', sa.Float(), nullable=False),
        sa.Column('si_units', sa.String(20), nullable=False),
        sa.Column('expected_budget_usd', sa.Float(), nullable=True),
        sa.Column('inspection_type', sa.String(20), nullable=False),
        sa.Column('single_day_inspection_date', sa.Date(), nullable=True),
        sa.Column('multi_day_inspection_start_date', sa.Date(), nullable=True),
        sa.Column('multi_day_inspection_end_date', sa.Date(), nullable=True),
        sa.Column('physical_inspection', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('chemical_testing', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('certificates', sa.JSON(), nullable=False),
        sa.Column('broken', sa.Float(), nullable=True),
        sa.Column('purity', sa.Float(), nullable=True),
        sa.Column('yellow_kernel', sa.Float(), nullable=True),
        sa.Column('damage_kernel', sa.Float(), nullable=True),
        sa.Column('red_kernel', sa.Float(), nullable=True),
        sa.Column('paddy_kernel', sa.Float(), nullable=True),
        sa.Column('chalky_rice', sa.Float(), nullable=True),
        sa.Column('live_insects', sa.Float(), nullable=True),
        sa.Column('milling_degree', sa.Float(), nullable=True),
        sa.Column('average_grain_length', sa.Float(), nullable=True),
        sa.Column('chemical_parameters', sa.Text(), nullable=True),
        sa.Column('company_name', sa.String(), nullable=False),
        sa.Column('contact_person_name', sa.String(), nullable=False),
        sa.Column('email_address', sa.String(), nullable=False),
        sa.Column('phone_number', sa.String(20), nullable=False),
        sa.Column('special_requirements', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_raise_enquiries_commodity_category', 'raise_enquiries', ['commodity_category'])
    op.create_index('ix_raise_enquiries_created_at', 'raise_enquiries', ['created_at'])


def downgrade():
    op.drop_table('raise_enquiries')
    op.drop_table('chemical_inspection_params')
    op.drop_table('physical_inspection_params')
    op.drop_table('international_companies')
    op.drop_table('indian_companies')
    op.drop_table('international_inspectors')
    op.drop_table('indian_inspectors')
    op.drop_table('customers')
    op.drop_table('users')
    sa.Enum(name='userrole').drop(op.get_bind(), checkfirst=True)
