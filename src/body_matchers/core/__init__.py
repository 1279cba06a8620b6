"""Runtime support for hosts that keep matchers alive for the process.

- Cleanup: TTL-based removal of correlation entries whose response never
  arrived
"""

from body_matchers.core.cleanup import cleanup_loop, start_cleanup_task, stop_cleanup_task

__all__ = ["cleanup_loop", "start_cleanup_task", "stop_cleanup_task"]
