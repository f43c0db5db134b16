"""Shared taxonomy builders and node tables for the unit tests."""

from pathlib import Path

from domain.taxonomy import Taxonomy

REPO_ROOT = Path(__file__).resolve().parents[1]


def make_taxonomy(nodes: list[dict], **meta) -> Taxonomy:
    data: dict = {"schemaVersion": "1.3.1", "nodes": nodes}
    if meta:
        data["meta"] = meta
    return Taxonomy.model_validate(data)


CLOTHING_NODES = [
    {"id": "occupation", "label": "职业", "parentId": None, "kind": "folder", "order": 0},
    {"id": "student", "label": "学生", "parentId": "occupation", "kind": "tag", "order": 0},
    {"id": "jk", "label": "JK", "parentId": "student", "kind": "tag", "order": 0},
    {"id": "maid", "label": "女仆", "parentId": "occupation", "kind": "tag", "order": 1},
    {"id": "clothing", "label": "衣服", "parentId": None, "kind": "folder", "order": 1},
    {"id": "upper", "label": "上半身", "parentId": "clothing", "kind": "folder", "order": 0},
    {"id": "sailor", "label": "水手服", "parentId": "upper", "kind": "tag", "order": 0},
    {"id": "shirt", "label": "衬衫", "parentId": "upper", "kind": "tag", "order": 1},
    {"id": "lower", "label": "下半身", "parentId": "clothing", "kind": "folder", "order": 1},
    {"id": "short-skirt", "label": "短裙", "parentId": "lower", "kind": "tag", "order": 0},
    {"id": "long-skirt", "label": "长裙", "parentId": "lower", "kind": "tag", "order": 1},
    {"id": "shoes", "label": "鞋", "parentId": None, "kind": "folder", "order": 2},
    {"id": "loafer", "label": "乐福鞋", "parentId": "shoes", "kind": "tag", "order": 0},
    {"id": "heels", "label": "高跟鞋", "parentId": "shoes", "kind": "tag", "order": 1},
    {"id": "stockings", "label": "丝袜", "parentId": None, "kind": "tag", "order": 3},
    {"id": "black-stockings", "label": "黑丝", "parentId": "stockings", "kind": "tag", "order": 0},
    {"id": "white-stockings", "label": "白丝", "parentId": "stockings", "kind": "tag", "order": 1},
]

BODYPARTS_NODES = [
    {"id": "uniform", "label": "制服", "parentId": None, "kind": "tag", "order": 0},
    {"id": "uniform-upper", "label": "上半身", "parentId": "uniform", "kind": "tag", "order": 0},
    {"id": "white-shirt", "label": "白衬衫", "parentId": "uniform-upper", "kind": "tag", "order": 0},
    {"id": "tie", "label": "领带", "parentId": "uniform-upper", "kind": "tag", "order": 1},
    {"id": "uniform-lower", "label": "下半身", "parentId": "uniform", "kind": "tag", "order": 1},
    {"id": "trousers", "label": "西裤", "parentId": "uniform-lower", "kind": "tag", "order": 0},
    {"id": "belt", "label": "皮带", "parentId": "uniform-lower", "kind": "tag", "order": 1},
    {"id": "casual", "label": "休闲", "parentId": None, "kind": "tag", "order": 1},
    {"id": "tshirt", "label": "T恤", "parentId": "casual", "kind": "tag", "order": 0},
]

ORDER_COLLISION_NODES = [
    {"id": "group-a", "label": "GroupA", "parentId": None, "kind": "folder", "order": 0},
    {"id": "a1", "label": "A1", "parentId": "group-a", "kind": "tag", "order": 0},
    {"id": "a2", "label": "A2", "parentId": "group-a", "kind": "tag", "order": 1},
    {"id": "group-b", "label": "GroupB", "parentId": None, "kind": "folder", "order": 0},
    {"id": "b1", "label": "B1", "parentId": "group-b", "kind": "tag", "order": 0},
    {"id": "b2", "label": "B2", "parentId": "group-b", "kind": "tag", "order": 1},
    {"id": "root", "label": "Root", "parentId": None, "kind": "folder", "order": 1},
    {"id": "c1", "label": "C1", "parentId": "root", "kind": "folder", "order": 0},
    {"id": "c1-t", "label": "T1", "parentId": "c1", "kind": "tag", "order": 0},
    {"id": "c2", "label": "C2", "parentId": "root", "kind": "folder", "order": 0},
    {"id": "c2-t", "label": "T2", "parentId": "c2", "kind": "tag", "order": 0},
]

