"""Model for users table"""
from sqlalchemy import Column, String
from sqlalchemy.orm import validates

from collablite.db.models import validators
from collablite.db.models.base import Base, IDPrimaryKey, Timestamps
from collablite.exceptions import InvalidInputError

MIN_PASSWORD_LENGTH = 6


class User(Base, IDPrimaryKey, Timestamps):
    __tablename__ = "user_user"
    username = Column(String(30), nullable=False)
    email = Column(String, nullable=False, index=True, unique=True)
    # Opaque to the API, never exposed through GraphQL.
    password = Column(String, nullable=False)

    @validates("username")
    def validate_username(self, key, value):
        return validators.trimmed_length("username", value, 3, 30)

    @validates("email")
    def validate_email(self, key, value):
        return validators.email(value)

    @validates("password")
    def validate_password(self, key, value):
        if value is None or len(value) < MIN_PASSWORD_LENGTH:
            raise InvalidInputError(
                f"password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        return value
