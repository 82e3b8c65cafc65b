"""bcrypt password helpers.

Not applied on the create/update path: passwords are stored as supplied.
"""

import bcrypt

# 2^14 iterations
BCRYPT_ROUNDS = 14


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """Hash password using bcrypt.

    Args:
        password: Plain text password
        rounds: bcrypt cost factor

    Returns:
        Bcrypt hashed password as string
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(plain_password.encode('utf-8'), hashed_password.encode('utf-8'))
