"""Centralized defaults for PageActions runs."""

# Default viewport
DEFAULT_VIEWPORT = (1280, 720)

# Timeouts (milliseconds). Applied as the Playwright page default timeout,
# which also bounds "wait for ..." actions.
DEFAULT_TIMEOUT_MS = 30_000

# Default config file looked up by the CLI
DEFAULT_CONFIG_FILE = "pageactions.yaml"

# Messages logged by the dispatcher around every action
RUNNING_ACTION_MESSAGE = "Running action: {command}"
ACTION_COMPLETE_MESSAGE = "  ✔︎ action complete"
