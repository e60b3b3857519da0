"""Domain layer for meta-project.

Pure data structures and functions: no filesystem access, no subprocesses.

Packages:
- shared: Result monad and domain event base class
- workspace: project records, tree nodes, plans, traversal and rendering
"""
