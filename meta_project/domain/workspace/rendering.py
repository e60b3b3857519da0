"""Tree renderers.

Two projections of a resolved tree: an indented box-drawing text layout
and a nested JSON-ready structure. Both are pure; the tree is not modified.
"""

from typing import Any

from .models import TreeNode

BRANCH = "├── "
LAST_BRANCH = "└── "
CONTINUATION = "│   "
SPACER = "    "


def render_text(nodes: list[TreeNode], prefix: str = "") -> str:
    """Render nodes as a box-drawing tree.

    Each line reads ``<prefix><glyph><name> (<path>)`` followed by
    `` [tag, ...]`` when the node has tags. The last sibling gets the
    terminal glyph and its children are indented with spaces; other
    siblings pass a vertical bar down to their children.

    Args:
        nodes: Sibling nodes to render.
        prefix: Indentation inherited from the parent level.

    Returns:
        The rendered lines joined with newlines, without a trailing newline.
    """
    return "\n".join(_render_lines(nodes, prefix))


def _render_lines(nodes: list[TreeNode], prefix: str) -> list[str]:
    lines: list[str] = []
    for i, node in enumerate(nodes):
        is_last = i == len(nodes) - 1
        connector = LAST_BRANCH if is_last else BRANCH
        tags = f" [{', '.join(node.tags)}]" if node.tags else ""
        lines.append(f"{prefix}{connector}{node.name} ({node.path}){tags}")

        if node.children:
            child_prefix = prefix + (SPACER if is_last else CONTINUATION)
            lines.extend(_render_lines(node.children, child_prefix))
    return lines


def render_structured(nodes: list[TreeNode]) -> list[dict[str, Any]]:
    """Render nodes as nested dictionaries.

    ``repo`` is omitted when unknown, ``tags`` and ``projects`` (the
    children) are omitted when empty.
    """
    rendered: list[dict[str, Any]] = []
    for node in nodes:
        item: dict[str, Any] = {"name": node.name, "path": node.path}
        if node.repo is not None:
            item["repo"] = node.repo
        if node.tags:
            item["tags"] = list(node.tags)
        item["is_meta"] = node.is_meta
        if node.children:
            item["projects"] = render_structured(node.children)
        rendered.append(item)
    return rendered


def render_listing(
    root_repo: str | None,
    nodes: list[TreeNode],
    json_output: bool = False,
) -> str | dict[str, Any]:
    """Render the full ``list`` output for a workspace root.

    Text form starts with ``. (<root-repo>)``; structured form is
    ``{"path": ".", "repo": ..., "projects": [...]}``.
    """
    repo = root_repo or ""
    if json_output:
        return {"path": ".", "repo": repo, "projects": render_structured(nodes)}

    header = f". ({repo})"
    body = render_text(nodes)
    return f"{header}\n{body}" if body else header
