"""
Script to create an admin account
Usage: python scripts/create_admin.py "Admin Name" admin@example.com <password>
"""

import sys
import os

# Add project root to Python path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lapor import create_app
from extensions import db
from lapor.models.admin import Admin


def create_admin(name, email, password):
    """Create an admin, or reset the password of an existing one"""
    app = create_app()

    with app.app_context():
        email = email.lower().strip()
        admin = Admin.query.filter_by(email=email).first()

        if admin:
            admin.set_password(password)
            db.session.commit()
            print(f"✓ Admin '{email}' already exists, password updated")
            return True

        admin = Admin(name=name, email=email, password=password)
        db.session.add(admin)
        db.session.commit()

        print(f"✅ Created admin '{email}'")
        print(f"   Name: {admin.name}")
        print(f"   ID: {admin.id}")
        return True


if __name__ == '__main__':
    if len(sys.argv) < 4:
        print('Usage: python scripts/create_admin.py "<name>" <email> <password>')
        print('Example: python scripts/create_admin.py "Admin Kelurahan" admin@example.com s3cret')
        sys.exit(1)

    create_admin(sys.argv[1], sys.argv[2], sys.argv[3])
