from dynamic_installer.adapters.shell.command import ShellCommandAdapter

__all__ = ["ShellCommandAdapter"]
