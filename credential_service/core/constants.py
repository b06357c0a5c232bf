"""
Shared constants for the core module.

Version: 1.0
"""

# Token configuration
DEFAULT_ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60

# Password hashing
BCRYPT_ROUNDS = 10

# Storage
USERS_COLLECTION = "users"
EMAIL_INDEX_NAME = "email_unique"

# Response messages
REGISTER_SUCCESS_MESSAGE = "User registered successfully"
LOGIN_SUCCESS_MESSAGE = "User logged in successfully"
DUPLICATE_IDENTITY_MESSAGE = "User with this email already exists"
INVALID_CREDENTIALS_MESSAGE = "Invalid credentials"
SERVER_ERROR_MESSAGE = "Server error"
ROOT_MESSAGE = "http get request sent to root api endpoint"
PASSWORD_NULL_MESSAGE = "Password must not contain null characters"
PASSWORD_TOO_LONG_MESSAGE = "Password is too long"
