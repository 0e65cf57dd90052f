"""
Dynamic Installer — drive a package manager's install command safely.

    from dynamic_installer import install_dependencies

    report = await install_dependencies({
        "global_options": "--save-dev",
        "dependencies": [{"name": "lodash"}, {"name": "axios", "override": True}],
    })
"""

__version__ = "0.1.0"

from dynamic_installer.core.engine.orchestrator import install_dependencies  # noqa: E402

__all__ = ["__version__", "install_dependencies"]
