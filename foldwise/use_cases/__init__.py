"""Use-cases: orchestration on top of components.

Use-cases accept their dependencies (worker pool, cancel token, seeds)
explicitly instead of relying on process-wide state.
"""
