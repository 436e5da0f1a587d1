#!/usr/bin/env python3
"""Create an administrator account, typically the first super admin.

Usage:
    # Using environment variables:
    ADMIN_USERNAME=root ADMIN_PASSWORD=SecurePassword123! python scripts/create_admin.py

    # Or with command line args:
    python scripts/create_admin.py --username root --password SecurePassword123! --role super_admin

The database and signing secrets are read from the usual settings
(DATABASE_URL, ACCESS_SECRET_KEY, REFRESH_SECRET_KEY).
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from sqlalchemy.orm import Session

# Add backend root to path for imports
ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

logger = logging.getLogger("create_admin")


def create_admin(db: Session, username: str, password: str, role: str) -> dict:
    """Create the admin unless the username is taken.

    Returns:
        dict with admin_id, username and status ('created' or 'exists')
    """
    from app.errors import AdminAlreadyExists
    from app.models.admin import Admin
    from app.repositories.admins import SqlAdminRepository
    from app.services.admins import AdminService

    repository = SqlAdminRepository(db)
    try:
        admin = AdminService(repository).create_admin(username, password, role)
    except AdminAlreadyExists:
        existing = db.query(Admin).filter_by(username=username).one()
        logger.info(f"Admin {username} already exists (id: {existing.id})")
        return {"admin_id": existing.id, "username": username, "status": "exists"}

    logger.info(f"Created {role} {username} (id: {admin.id})")
    return {"admin_id": admin.id, "username": username, "status": "created"}


def main(argv: list[str] | None = None) -> int:
    from app.models.admin import ROLE_SUPER_ADMIN, ROLES
    from app.services.passwords import MAX_PASSWORD_BYTES

    parser = argparse.ArgumentParser(description="Create an admin panel account")
    parser.add_argument("--username", default=os.environ.get("ADMIN_USERNAME"))
    parser.add_argument("--password", default=os.environ.get("ADMIN_PASSWORD"))
    parser.add_argument("--role", choices=ROLES, default=ROLE_SUPER_ADMIN)
    args = parser.parse_args(argv)

    if not args.username or not args.password:
        parser.error("--username and --password (or ADMIN_USERNAME/ADMIN_PASSWORD) are required")
    if len(args.password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        parser.error(f"--password must be at most {MAX_PASSWORD_BYTES} bytes")

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    from app.database import create_tables, get_db_context

    create_tables()
    with get_db_context() as db:
        result = create_admin(db, args.username, args.password, args.role)

    print(f"{result['status']}: {result['username']} (id: {result['admin_id']})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
