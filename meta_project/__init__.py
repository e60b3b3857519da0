"""meta-project - inspect and reconcile nested multi-repository workspaces.

A workspace is a directory whose manifest (``.meta``) lists sub-projects and
their remote URLs. Sub-projects may themselves be workspaces with their own
manifest, forming a tree that this package can list, check and plan fetches for.
"""

__version__ = "0.3.0"
