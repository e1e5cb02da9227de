"""Service layer: trigger policy, constrained resizing, orchestration and lifecycle."""
