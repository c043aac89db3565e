from .planner import plan_build, resolve_all

__all__ = ["plan_build", "resolve_all"]
