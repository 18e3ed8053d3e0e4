"""
debug_logger.py
---------------
Category-filtered console logger used by every viewstack subsystem.

Output format:
    [HH:MM:SS] [Source][TAG] message
"""

import sys
from datetime import datetime


# ===========================================================
# Logger Configuration
# ===========================================================

class LoggerConfig:
    """Controls which subsystems emit log messages and at what verbosity."""

    ENABLE_LOGGING = True
    LOG_LEVEL = "INFO"  # NONE, ERROR, WARN, INFO, VERBOSE

    CATEGORIES = {
        # Lifecycle
        "system": True,
        "view": True,
        "layer": True,
        "transition": False,
        "focus": True,
        "loading": True,

        # Input
        "input": False,
        "pointer_lock": True,

        # Collaborators
        "assets": False,
        "render": False,
        "sprite": False,
        "config": True,
        "timing": False,
    }

    SHOW_TIMESTAMP = True
    SHOW_SOURCE = True


# ===========================================================
# ANSI Colors
# ===========================================================

class Colors:
    """ANSI escape codes for terminal colors."""
    RESET = "\033[0m"
    WHITE = "\033[97m"
    GREEN = "\033[92m"
    MAGENTA = "\033[95m"
    CYAN = "\033[96m"
    BLUE = "\033[94m"
    YELLOW = "\033[93m"
    RED = "\033[91m"


# ===========================================================
# Debug Logger
# ===========================================================

class DebugLogger:
    """Static logger with category filtering and colored output."""

    LINE_LENGTH = 59

    TAG_COLORS = {
        "INIT": Colors.WHITE,
        "SYSTEM": Colors.MAGENTA,
        "STATE": Colors.CYAN,
        "ACTION": Colors.GREEN,
        "TRACE": Colors.BLUE,
        "WARN": Colors.YELLOW,
        "FAIL": Colors.RED,
    }

    LEVEL_VALUES = {
        "NONE": 0,
        "ERROR": 1,
        "WARN": 2,
        "INFO": 3,
        "VERBOSE": 4
    }

    # ===========================================================
    # Caller Detection
    # ===========================================================

    @staticmethod
    def _get_caller() -> str:
        """Name the class (or module) that called the public log method."""
        try:
            frame = sys._getframe(3)
        except ValueError:
            return "Unknown"

        local_vars = frame.f_locals
        if "self" in local_vars:
            return type(local_vars["self"]).__name__
        if "cls" in local_vars and isinstance(local_vars["cls"], type):
            return local_vars["cls"].__name__

        filename = frame.f_code.co_filename.replace("\\", "/").rsplit("/", 1)[-1]
        return "".join(part.capitalize() for part in filename[:-3].split("_"))

    # ===========================================================
    # Core Logging
    # ===========================================================

    @staticmethod
    def should_log(category: str, level: str) -> bool:
        """Check whether a message passes the enable switch, category and level filters."""
        if not LoggerConfig.ENABLE_LOGGING:
            return False
        level_val = DebugLogger.LEVEL_VALUES.get(level, 3)
        # Errors ignore category switches
        if level_val > DebugLogger.LEVEL_VALUES["ERROR"] and not LoggerConfig.CATEGORIES.get(category, False):
            return False
        config_val = DebugLogger.LEVEL_VALUES.get(LoggerConfig.LOG_LEVEL, 3)
        return level_val <= config_val

    @staticmethod
    def _log(tag: str, message: str, category: str, level: str):
        if not DebugLogger.should_log(category, level):
            return

        parts = []
        if LoggerConfig.SHOW_TIMESTAMP:
            parts.append(f"[{datetime.now().strftime('%H:%M:%S')}] ")
        if LoggerConfig.SHOW_SOURCE:
            parts.append(f"[{DebugLogger._get_caller()}]")
        parts.append(f"[{tag}] ")

        color = DebugLogger.TAG_COLORS.get(tag, Colors.RESET)
        print(f"{color}{''.join(parts)}{message}{Colors.RESET}")

    # ===========================================================
    # Public Log Methods
    # ===========================================================

    @staticmethod
    def init(msg: str = "", category: str = "system"):
        """Initialization log. Empty message prints blank line."""
        if not msg.strip():
            print()
            return
        DebugLogger._log("INIT", msg, category, "INFO")

    @staticmethod
    def system(msg: str, category: str = "system"):
        DebugLogger._log("SYSTEM", msg, category, "INFO")

    @staticmethod
    def state(msg: str, category: str = "view"):
        """Lifecycle state change log."""
        DebugLogger._log("STATE", msg, category, "INFO")

    @staticmethod
    def action(msg: str, category: str = "system"):
        DebugLogger._log("ACTION", msg, category, "INFO")

    @staticmethod
    def trace(msg: str, category: str = "transition"):
        """Verbose per-frame trace log."""
        DebugLogger._log("TRACE", msg, category, "VERBOSE")

    @staticmethod
    def warn(msg: str, category: str = "system"):
        DebugLogger._log("WARN", msg, category, "WARN")

    @staticmethod
    def fail(msg: str, category: str = "system"):
        """Error/failure log. Shown for every category unless LOG_LEVEL is NONE."""
        DebugLogger._log("FAIL", msg, category, "ERROR")

    # ===========================================================
    # Section Formatting
    # ===========================================================

    @staticmethod
    def section(title: str):
        """Print a section header."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        line = "─" * DebugLogger.LINE_LENGTH
        title_line = f"[{title}]".center(DebugLogger.LINE_LENGTH)
        print(f"\n{Colors.WHITE}{line}\n{title_line}{Colors.RESET}\n")

    @staticmethod
    def init_entry(module: str, status: str = "OK"):
        """Print a dotted diagnostic entry, e.g. '> ViewManager ....... [OK]'."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        status_color = {
            "OK": Colors.GREEN,
            "LOADING": Colors.CYAN,
            "FAIL": Colors.RED,
        }.get(status.upper(), Colors.WHITE)

        prefix = f"> {module}"
        status_str = f"[{status}]"
        dot_count = max(DebugLogger.LINE_LENGTH - len(prefix) - len(status_str) - 2, 1)
        print(f"{Colors.WHITE}{prefix} {'.' * dot_count} {status_color}{status_str}{Colors.RESET}")

    @staticmethod
    def init_sub(detail: str, level: int = 1):
        """Print indented sub-detail."""
        if not LoggerConfig.ENABLE_LOGGING:
            return
        indent = " " * (level * 4)
        print(f"{indent}• {Colors.WHITE}{detail}{Colors.RESET}")
