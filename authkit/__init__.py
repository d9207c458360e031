"""authkit.

Password hashing and user input validation for API authentication flows.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
