#!/usr/bin/env python3
"""
Create a user account from the command line.

The users API requires an admin caller, so the first admin is created here.

Usage:
    python scripts/create_user.py --email admin@example.com --password secret --role ADMIN [--name "Ada"]
"""

import argparse
import asyncio
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app.config import settings
from app.core.exceptions import AppError
from app.db.session import Database
from app.schemas.user import UserCreate
from app.services.users import create_user


async def run(email: str, password: str, name: str, role: str) -> int:
    database = Database.from_settings(settings)
    try:
        await database.create_all()
        async with database.session_factory() as session:
            try:
                user = await create_user(
                    session, UserCreate(email=email, password=password, name=name, role=role)
                )
                await session.commit()
            except AppError as e:
                await session.rollback()
                print(f"Error: {e.message}")
                return 1
        print(f"Created user {user.id}: {user.email} ({user.role})")
        return 0
    finally:
        await database.dispose()


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Create a user account')
    parser.add_argument('--email', required=True)
    parser.add_argument('--password', required=True)
    parser.add_argument('--name', default=None)
    parser.add_argument('--role', default='EMPLOYEE', help='ADMIN or EMPLOYEE')

    args = parser.parse_args()

    sys.exit(asyncio.run(run(args.email, args.password, args.name, args.role)))
