from dynamic_installer.core.observability.run_log import (
    RunLog,
    console_sink,
    format_entry,
    stderr_sink,
)

__all__ = ["RunLog", "console_sink", "format_entry", "stderr_sink"]
