class ErrorMessages:
    TEAM_NOT_FOUND = "Team not found with id: {}"
    MEMBER_NOT_FOUND = "Team member not found with id: {}"
    PROJECT_NOT_FOUND = "Project not found with id: {}"

    # Uniqueness
    TEAM_NAME_EXISTS = "Team with name '{}' already exists"
    MEMBER_EMAIL_EXISTS = "Member with email '{}' already exists"
    PROJECT_NAME_EXISTS = "Project with name '{}' already exists"
    CONSTRAINT_VIOLATION = "Resource conflicts with an existing record"
    REFERENCE_MISSING = "A referenced resource no longer exists"

    # State
    MEMBER_NOT_ASSIGNED = "Member is not assigned to any team"

    # Boundary
    VALIDATION_FAILED = "Validation failed"
    UNEXPECTED_ERROR = "An unexpected error occurred: {}"

class FieldLimits:
    NAME_MAX = 100
    DESCRIPTION_MAX = 500
    EMAIL_MAX = 100
    ROLE_MAX = 50
