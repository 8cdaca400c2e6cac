"""
Business errors returned by use cases.

Each error carries a stable code and a kind; the API layer maps the kind to
an HTTP status and never looks at the message.
"""

from src.libs.result import Error, ErrorKind

# Authentication
EMAIL_ALREADY_EXISTS = Error("EMAIL_ALREADY_EXISTS", "Email already exists", ErrorKind.conflict)
INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid credentials", ErrorKind.unauthorized)

# Boards (inaccessible and missing boards are indistinguishable)
BOARD_NOT_FOUND = Error("BOARD_NOT_FOUND", "Board not found or access denied", ErrorKind.not_found)
CANNOT_UPDATE_BOARD = Error(
    "INSUFFICIENT_ROLE", "Only owners and maintainers can update boards", ErrorKind.forbidden
)
CANNOT_DELETE_BOARD = Error("INSUFFICIENT_ROLE", "Only owners can delete boards", ErrorKind.forbidden)

# Members
USER_NOT_FOUND = Error("USER_NOT_FOUND", "User not found", ErrorKind.not_found)
MEMBER_NOT_FOUND = Error("MEMBER_NOT_FOUND", "Member not found", ErrorKind.not_found)
ALREADY_MEMBER = Error("ALREADY_MEMBER", "User is already a member of this board", ErrorKind.conflict)
INVALID_ROLE = Error(
    "INVALID_ROLE", "Invalid role. Must be OWNER, MAINTAINER, or MEMBER", ErrorKind.bad_request
)
CANNOT_ADD_MEMBER = Error(
    "INSUFFICIENT_ROLE", "Only owners and maintainers can add members", ErrorKind.forbidden
)
CANNOT_UPDATE_MEMBER_ROLE = Error(
    "INSUFFICIENT_ROLE", "Only owners and maintainers can update member roles", ErrorKind.forbidden
)
CANNOT_REMOVE_MEMBER = Error(
    "INSUFFICIENT_ROLE", "Only owners and maintainers can remove members", ErrorKind.forbidden
)
LAST_OWNER_ROLE_CHANGE = Error(
    "LAST_OWNER", "Cannot change the role of the last owner", ErrorKind.forbidden
)
LAST_OWNER_REMOVAL = Error("LAST_OWNER", "Cannot remove the last owner", ErrorKind.forbidden)

# Tasks
TASK_NOT_FOUND = Error("TASK_NOT_FOUND", "Task not found", ErrorKind.not_found)
ASSIGNEE_NOT_MEMBER = Error(
    "ASSIGNEE_NOT_MEMBER", "Assigned user is not a member of this board", ErrorKind.bad_request
)
CANNOT_DELETE_TASK = Error(
    "INSUFFICIENT_ROLE",
    "Only task creator, owners and maintainers can delete tasks",
    ErrorKind.forbidden,
)
