"""Library constants and default settings."""

from pathlib import Path

# Library metadata
APP_NAME = "unitctl"
APP_VERSION = "1.0.0"

# External service-control command
SYSTEMCTL_PATH = "/usr/bin/systemctl"

# Directories searched for unit definition files, in scan order
UNIT_PATHS = (
    "/usr/lib/systemd/system/",
    "/etc/systemd/system/",
    "/usr/local/lib/systemd/system/",
    "/etc/systemd/user/",
    "/etc/systemd/system.control/",
    "/run/systemd/system.control/",
    "/run/systemd/transient/",
    "/run/systemd/generator.early/",
    "/etc/systemd/systemd.attached/",
    "/run/systemd/system/",
    "/run/systemd/systemd.attached/",
    "/run/systemd/generator/",
    "/lib/systemd/system/",
    "/run/systemd/generator.late/",
    "/usr/lib/systemd/user/",
)

# Paths
CONFIG_DIR = Path.home() / ".config" / "unitctl"
CONFIG_FILE = CONFIG_DIR / "config.yaml"
CONFIG_ENV_VAR = "UNITCTL_CONFIG"

# Default settings
DEFAULT_TIMEOUT = None  # seconds, None waits for the command to finish
DEFAULT_NORMALIZE_OUTPUT = False

# Literal replies of `systemctl is-active` / `systemctl is-enabled`
OUTPUT_ACTIVE = "active\n"
OUTPUT_INACTIVE = "inactive\n"
OUTPUT_ENABLED = "enabled\n"
OUTPUT_DISABLED = "disabled\n"

# Subcommands accepted by ServiceManager.execute_action
MUTATING_ACTIONS = ("enable", "disable", "start", "stop", "restart", "reload")
