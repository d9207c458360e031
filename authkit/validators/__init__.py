"""Field validators for user registration input.

Each validator checks one field and raises ``ValidationError`` with a
user-displayable message on the first violated rule.

Available validators:
- password.py: Password strength
- email.py: Email format (plus ``normalize_email``)
- phone.py: Phone number shape
- username.py: Username length and charset
- full_name.py: First and last name
- role.py: Account role (``client`` or ``trainer``)
"""

from authkit.validators.email import normalize_email, validate_email
from authkit.validators.full_name import validate_full_name
from authkit.validators.password import validate_password
from authkit.validators.phone import validate_phone_number
from authkit.validators.role import Role, validate_role
from authkit.validators.username import validate_username

__all__ = [
    "Role",
    "normalize_email",
    "validate_email",
    "validate_full_name",
    "validate_password",
    "validate_phone_number",
    "validate_role",
    "validate_username",
]
