from datetime import datetime, timezone
from typing import Optional

import attrs
from pydantic import EmailStr, SecretStr, TypeAdapter, ValidationError

from src.platform.exception.exceptions import InvalidInputError
from src.platform.logging.loguru_io import Logger


_email_adapter: TypeAdapter[str] = TypeAdapter(EmailStr)


@attrs.define
class UserEntity:
    email: str
    name: str
    phone: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    created_at: Optional[datetime] = None

    @staticmethod
    def normalize_email(email: str) -> str:
        try:
            return _email_adapter.validate_python((email or '').strip()).lower()
        except ValidationError:
            raise InvalidInputError(f'Invalid email address: {email!r}')

    @classmethod
    @Logger.io
    def create(cls, *, email: str, name: str, phone: str = '') -> 'UserEntity':
        if not name or not name.strip():
            raise InvalidInputError('User name is required')
        return cls(
            email=cls.normalize_email(email),
            name=name.strip(),
            phone=(phone or '').strip(),
            created_at=datetime.now(timezone.utc),
        )

    def set_password(self, plain_password: str, password_hasher) -> None:
        """Set password using provided password hasher"""
        from src.service.cinema.app.interface.i_password_hasher import IPasswordHasher

        if not isinstance(password_hasher, IPasswordHasher):
            raise TypeError('password_hasher must implement IPasswordHasher interface')
        if not plain_password:
            raise InvalidInputError('Password is required')

        self.hashed_password = password_hasher.hash_password(plain_password=SecretStr(plain_password))
