# User-facing copy for every validation outcome, keyed by field wire name.
# Messages are not localised.

NAME_REQUIRED = "Full name is required"
NAME_TOO_SHORT = "Name must be at least 3 characters long"
NAME_NO_NUMBERS = "Name cannot contain numbers"
NAME_VALID = "Valid name"

EMAIL_REQUIRED = "Email address is required"
EMAIL_INVALID = "Please enter a valid email address"
EMAIL_VALID = "Valid email address"

PASSWORD_REQUIRED = "Password is required"
PASSWORD_WEAK = "Password must be at least 8 characters with uppercase, lowercase, number, and special character"
PASSWORD_VALID = "Strong password"

CONFIRM_REQUIRED = "Please confirm your password"
CONFIRM_NO_MATCH = "Passwords do not match"
CONFIRM_VALID = "Passwords match"

# Reason handed to the renderer when a submit is attempted on an incomplete form
SUBMIT_REJECTED_REASON = "Please fix all validation errors before submitting."
