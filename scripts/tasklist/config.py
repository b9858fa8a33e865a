"""Constants and user-facing strings for the task list."""

MAX_TASK_LENGTH = 80

# Display-mode rows show at most this many characters before "..."
DISPLAY_TRUNCATE = 30

COUNTER_COLOR = "#ffffff"
COUNTER_WARNING_COLOR = "#de3e53"

DEFAULT_LOG_DIR = ".local/tasklist"


class TaskStrings:
    """Messages shown to the user."""

    EMPTY_INPUT_ERROR = "Empty input! Please try again"
    DUPLICATE_TASK_ERROR = "Task has already existed! Please try again"
    EXCEED_LENGTH_ERROR = f"Task description has reached max length of {MAX_TASK_LENGTH}!"
    NO_RESULTS = "No Results! Please check your spelling"
    NO_TASKS = "No tasks here, write your task and click '+'"
