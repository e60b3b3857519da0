from __future__ import annotations

from meta_project.domain.workspace import (
    TreeNode,
    fold_nodes,
    render_listing,
    render_structured,
    render_text,
)


def _flatten(nodes: list[TreeNode]) -> list[tuple[str, str, int]]:
    return fold_nodes(nodes, [], lambda acc, node, depth: acc + [(node.name, node.path, depth)])


def _sample_tree() -> list[TreeNode]:
    return [
        TreeNode(
            name="platform",
            path="platform",
            repo="git@x:platform.git",
            is_meta=True,
            children=[
                TreeNode(
                    name="api",
                    path="platform/api",
                    repo="git@x:api.git",
                    tags=["backend", "go"],
                    is_meta=True,
                    children=[TreeNode(name="proto", path="platform/api/proto", repo="git@x:proto.git")],
                ),
                TreeNode(name="web", path="platform/web", repo="git@x:web.git"),
            ],
        ),
        TreeNode(name="docs", path="docs"),
    ]


def test_render_text_uses_branch_and_terminal_glyphs() -> None:
    text = render_text(_sample_tree())

    assert text.splitlines() == [
        "├── platform (platform)",
        "│   ├── api (platform/api) [backend, go]",
        "│   │   └── proto (platform/api/proto)",
        "│   └── web (platform/web)",
        "└── docs (docs)",
    ]


def test_render_text_indents_children_of_last_node_with_spaces() -> None:
    nodes = [
        TreeNode(
            name="only",
            path="only",
            is_meta=True,
            children=[TreeNode(name="leaf", path="only/leaf")],
        )
    ]

    assert render_text(nodes) == "└── only (only)\n    └── leaf (only/leaf)"


def test_render_text_applies_prefix_and_handles_empty_input() -> None:
    assert render_text([TreeNode(name="a", path="a")], prefix=">> ") == ">> └── a (a)"
    assert render_text([]) == ""


def test_render_structured_omits_absent_fields() -> None:
    structured = render_structured(_sample_tree())

    platform, docs = structured
    assert docs == {"name": "docs", "path": "docs", "is_meta": False}
    assert "tags" not in platform
    api = platform["projects"][0]
    assert api["tags"] == ["backend", "go"]
    assert api["projects"] == [
        {"name": "proto", "path": "platform/api/proto", "repo": "git@x:proto.git", "is_meta": False}
    ]
    assert "projects" not in platform["projects"][1]


def test_text_and_structured_agree_on_names_paths_and_depths() -> None:
    nodes = _sample_tree()

    def walk(items: list[dict], depth: int = 0) -> list[tuple[str, str, int]]:
        out: list[tuple[str, str, int]] = []
        for item in items:
            out.append((item["name"], item["path"], depth))
            out.extend(walk(item.get("projects", []), depth + 1))
        return out

    from_structured = walk(render_structured(nodes))
    from_text = []
    for line in render_text(nodes).splitlines():
        marker = line.index("── ")
        name, _, rest = line[marker + 3 :].partition(" (")
        from_text.append((name, rest.split(")")[0], marker // 4))

    assert from_structured == from_text == _flatten(nodes)


def test_rendering_does_not_mutate_the_tree() -> None:
    nodes = _sample_tree()
    before = [node.model_dump() for node in nodes]

    render_text(nodes)
    render_structured(nodes)

    assert [node.model_dump() for node in nodes] == before


def test_render_listing_text_header_and_structured_root() -> None:
    nodes = [TreeNode(name="repo1", path="repo1", repo="git@x:repo1.git")]

    assert render_listing("git@x:root.git", nodes) == ". (git@x:root.git)\n└── repo1 (repo1)"
    assert render_listing(None, []) == ". ()"
    assert render_listing(None, nodes, json_output=True) == {
        "path": ".",
        "repo": "",
        "projects": [{"name": "repo1", "path": "repo1", "repo": "git@x:repo1.git", "is_meta": False}],
    }
