class UserServiceError(Exception):
    """Base class for failures raised by a UserService implementation"""


class UserNotFoundError(UserServiceError):
    """No user matches the requested identifier"""


class DuplicateUserError(UserServiceError):
    """A user with the same username already exists"""


class InvalidCredentialsError(UserServiceError):
    """Username/password pair did not match a stored user"""
