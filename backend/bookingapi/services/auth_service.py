"""
Booking API - Admin Authentication Service
===========================================

What:  Registration and credential checks for the admin account(s).
How:   Passwords are hashed with werkzeug's salted one-way hashes
       (scrypt by default, configurable via PASSWORD_HASH_METHOD).

Login is stateless: a successful check returns a confirmation and nothing
else. No token or session is issued, so callers must not treat it as one.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from werkzeug.security import check_password_hash, generate_password_hash

from bookingapi.exceptions import AuthError, ConflictError, DatabaseError, NotFoundError
from bookingapi.models.admin import AdminUser
from bookingapi.schemas.auth import AdminCredentials

logger = logging.getLogger(__name__)


class AuthService:
    """
    Admin registration and login.

    Args:
        hash_method: werkzeug method string passed to generate_password_hash
    """

    def __init__(self, hash_method: str = "scrypt"):
        self.hash_method = hash_method

    def hash_password(self, password: str) -> str:
        return generate_password_hash(password, method=self.hash_method)

    async def register(self, db: AsyncSession, credentials: AdminCredentials) -> AdminUser:
        """
        Create a new admin.

        Duplicate names are rejected by the UNIQUE constraint on
        admin_users.admin; the IntegrityError raised at flush becomes a
        ConflictError (400).
        """
        user = AdminUser(
            admin=credentials.admin,
            password_hash=self.hash_password(credentials.password),
        )
        try:
            db.add(user)
            await db.flush()
        except IntegrityError:
            logger.info("Registration rejected: admin '%s' already exists", credentials.admin)
            raise ConflictError(
                message="Admin already exists",
                context={"admin": credentials.admin},
            )
        except SQLAlchemyError as e:
            logger.error("Database error registering admin: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        logger.info("Admin registered: %s", user.admin)
        return user

    async def login(self, db: AsyncSession, credentials: AdminCredentials) -> AdminUser:
        """
        Verify admin credentials.

        Raises:
            NotFoundError: no admin with that name (→ 404)
            AuthError: password does not match (→ 401)
        """
        try:
            result = await db.execute(
                select(AdminUser).where(AdminUser.admin == credentials.admin)
            )
            user = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error during login: %s", str(e), exc_info=True)
            raise DatabaseError(context={"error_type": type(e).__name__})

        if user is None:
            raise NotFoundError(resource="User", message="User not found")

        if not check_password_hash(user.password_hash, credentials.password):
            logger.warning("Failed login for admin '%s'", credentials.admin)
            raise AuthError(message="Invalid password")

        return user
