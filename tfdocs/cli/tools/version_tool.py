"""Version information tool."""

from __future__ import annotations

from typing import Any

import tfdocs

from ...app import Tool, ToolConfig


def _get_build_info() -> dict[str, Any]:
    """Get build info from the installed package, empty when not built."""
    try:
        from tfdocs import _build_info  # type: ignore[attr-defined]
    except ImportError:
        return {}
    return {
        "commit": getattr(_build_info, "COMMIT_SHORT", "") or None,
        "time": getattr(_build_info, "BUILD_TIME", "") or None,
        "modified": getattr(_build_info, "MODIFIED", None),
    }


class VersionTool(Tool):
    """Print the version and, for built packages, the git commit."""

    def _create_config(self) -> ToolConfig:
        return ToolConfig(
            name="version",
            help_text="Print the version number of tfdocs",
            disable_autogen_tag=True,
        )

    def run(self, **kwargs: Any) -> int:
        line = f"tfdocs version {tfdocs.__version__}"
        build = _get_build_info()
        if build.get("commit"):
            commit = build["commit"] + ("-dirty" if build.get("modified") else "")
            line += f" ({commit})"
            if build.get("time"):
                line += f" built {build['time']}"
        self.trace_attr("out").write(line)
        return 0
