"""Bootstrap roles and the built-in accounts.

Safe to run on every startup: roles are matched by name and accounts by
email, and anything already present is left untouched.
"""

import logging

from sqlalchemy.orm import Session

import auth
import models
from repositories import RoleRepository, UserRepository

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD = "P@ssword1"

ROLES = (auth.ADMINISTRATOR, auth.CUSTOMER)

# (username, email, role)
ACCOUNTS = (
    ("admin", "admin@bookstore.com", auth.ADMINISTRATOR),
    ("admin0@bookstore.com", "admin0@bookstore.com", auth.ADMINISTRATOR),
    ("customer@bookstore.com", "customer@bookstore.com", auth.CUSTOMER),
    ("customer1", "customer1@bookstore.com", auth.CUSTOMER),
    ("customer2", "customer2@bookstore.com", auth.CUSTOMER),
)


def seed(db: Session) -> None:
    seed_roles(RoleRepository(db))
    seed_users(UserRepository(db), RoleRepository(db))


def seed_roles(roles: RoleRepository) -> None:
    for name in ROLES:
        if roles.role_exists(name):
            continue
        if roles.create(models.Role(name=name)):
            logger.info("Seeded role %s", name)
        else:
            logger.error("Failed to seed role %s", name)


def seed_users(users: UserRepository, roles: RoleRepository) -> None:
    for username, email, role_name in ACCOUNTS:
        if users.find_by_email(email) is not None:
            continue

        role = roles.find_by_name(role_name)
        if role is None:
            logger.error("Role %s is missing, skipping user %s", role_name, email)
            continue

        user = models.User(username=username, email=email, roles=[role])
        if not users.create_with_password(user, DEFAULT_PASSWORD):
            logger.error("Failed to seed user %s", email)
            continue
        logger.info("Seeded user %s as %s", email, role_name)
