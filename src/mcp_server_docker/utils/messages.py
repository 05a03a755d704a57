"""Centralized message templates for Docker operations.

All messages use template strings with format() placeholders.
"""

# Resource not found error messages
ERROR_CONTAINER_NOT_FOUND = "Container not found: {}"
ERROR_IMAGE_NOT_FOUND = "Image not found: {}"

# Confirmation messages returned by state-changing operations
CONTAINER_ACTION_DONE = "Container {} {}"
IMAGE_REMOVED = "Image {} removed"

# Placeholders rendered when an operation has nothing to show
NO_CONTAINERS_FOUND = "No containers found."
NO_IMAGES_FOUND = "No images found."
NO_LOGS = "(no logs)"
NO_OUTPUT = "(no output)"
