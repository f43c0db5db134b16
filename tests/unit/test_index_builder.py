import pytest
from pydantic import ValidationError

from domain.taxonomy import IndexConsistencyError, Taxonomy, build_index, compute_sort_path
from tests.helpers import CLOTHING_NODES, make_taxonomy

DETERMINISM_NODES = [
    {"id": "n1", "label": "apple", "parentId": None, "kind": "tag", "order": 0},
    {"id": "n2", "label": "Apple", "parentId": None, "kind": "tag", "order": 0},
    {"id": "n3", "label": "APPLE", "parentId": None, "kind": "tag", "order": 0},
    {"id": "n4", "label": "中文", "parentId": None, "kind": "tag", "order": 0},
    {"id": "n5", "label": "日本語", "parentId": None, "kind": "tag", "order": 0},
    {"id": "n6", "label": "123", "parentId": None, "kind": "tag", "order": 0},
    {"id": "n7", "label": "12", "parentId": None, "kind": "tag", "order": 0},
    {"id": "n8", "label": "1A", "parentId": None, "kind": "tag", "order": 0},
]


def test_root_children_follow_utf16_label_order() -> None:
    index = build_index(make_taxonomy(DETERMINISM_NODES))

    assert index.children_of[None] == ("n7", "n6", "n8", "n3", "n2", "n1", "n4", "n5")
    assert [index.sibling_ordinal[i] for i in ("n7", "n6", "n8", "n3", "n2", "n1", "n4", "n5")] == list(range(8))


def test_all_same_order_roots_sorted_by_label() -> None:
    index = build_index(
        make_taxonomy(
            [
                {"id": "z", "label": "Z", "parentId": None, "kind": "tag", "order": 0},
                {"id": "a", "label": "A", "parentId": None, "kind": "tag", "order": 0},
                {"id": "m", "label": "M", "parentId": None, "kind": "tag", "order": 0},
            ]
        )
    )

    assert index.children_of[None] == ("a", "m", "z")
    assert index.sibling_ordinal == {"a": 0, "m": 1, "z": 2}


def test_same_order_and_label_falls_back_to_id() -> None:
    index = build_index(
        make_taxonomy(
            [
                {"id": "node-z", "label": "Same", "parentId": None, "kind": "tag", "order": 0},
                {"id": "node-a", "label": "Same", "parentId": None, "kind": "tag", "order": 0},
                {"id": "node-m", "label": "Same", "parentId": None, "kind": "tag", "order": 0},
            ]
        )
    )

    assert index.children_of[None] == ("node-a", "node-m", "node-z")


def test_empty_label_sorts_first() -> None:
    index = build_index(
        make_taxonomy(
            [
                {"id": "a", "label": "A", "parentId": None, "kind": "tag", "order": 0},
                {"id": "empty", "label": "", "parentId": None, "kind": "tag", "order": 0},
            ]
        )
    )

    assert index.children_of[None] == ("empty", "a")


def test_order_collision_ordinals_and_sort_paths(order_collision: Taxonomy) -> None:
    index = build_index(order_collision)

    assert index.children_of[None] == ("group-a", "group-b", "root")
    assert index.children_of["root"] == ("c1", "c2")
    assert index.sort_path_cache["a1"] == (0, 0)
    assert index.sort_path_cache["a2"] == (0, 1)
    assert index.sort_path_cache["b1"] == (1, 0)
    assert index.sort_path_cache["b2"] == (1, 1)
    assert index.sort_path_cache["c1-t"] == (2, 0, 0)
    assert index.sort_path_cache["c2-t"] == (2, 1, 0)


def test_clothing_index_shape(clothing: Taxonomy) -> None:
    index = build_index(clothing)

    assert len(index.by_id) == 17
    assert len(index.children_of[None]) == 4
    assert index.sort_path_cache["occupation"] == (0,)
    assert index.sort_path_cache["stockings"] == (3,)
    assert index.sort_path_cache["jk"] == (0, 0, 0)
    assert index.sort_path_cache["sailor"] == (1, 0, 0)
    assert index.sort_path_cache["short-skirt"] == (1, 1, 0)
    assert index.sort_path_cache["loafer"] == (2, 0)
    assert index.sort_path_cache["black-stockings"] == (3, 0)


def test_index_does_not_depend_on_node_list_order() -> None:
    forward = build_index(make_taxonomy(CLOTHING_NODES))
    backward = build_index(make_taxonomy(list(reversed(CLOTHING_NODES))))

    assert forward.children_of == backward.children_of
    assert forward.sibling_ordinal == backward.sibling_ordinal
    assert forward.sort_path_cache == backward.sort_path_cache


def test_empty_folder_and_leafless_tag_are_indexed() -> None:
    index = build_index(
        make_taxonomy(
            [
                {"id": "empty-folder", "label": "Empty", "parentId": None, "kind": "folder", "order": 0},
                {"id": "parent-tag", "label": "Parent", "parentId": None, "kind": "tag", "order": 1},
                {"id": "child", "label": "Child", "parentId": "parent-tag", "kind": "folder", "order": 0},
            ]
        )
    )

    assert "empty-folder" not in index.children_of
    assert index.children_of["parent-tag"] == ("child",)
    assert index.sort_path_cache["child"] == (1, 0)


def test_orphan_node_fails_index_build() -> None:
    orphan = make_taxonomy([{"id": "a", "label": "A", "parentId": "missing", "kind": "tag", "order": 0}])

    with pytest.raises(IndexConsistencyError, match="missing"):
        build_index(orphan)


def test_cyclic_parent_chain_fails_index_build() -> None:
    cyclic = make_taxonomy(
        [
            {"id": "a", "label": "A", "parentId": "b", "kind": "folder", "order": 0},
            {"id": "b", "label": "B", "parentId": "a", "kind": "folder", "order": 0},
        ]
    )

    with pytest.raises(IndexConsistencyError, match="loops at"):
        build_index(cyclic)


def test_compute_sort_path_rejects_unknown_id() -> None:
    with pytest.raises(IndexConsistencyError):
        compute_sort_path({}, {}, "ghost")


def test_index_is_frozen(clothing: Taxonomy) -> None:
    index = build_index(clothing)

    with pytest.raises(ValidationError):
        index.by_id = {}  # type: ignore[misc]
