import pytest

from domain.taxonomy import Taxonomy
from tests.helpers import BODYPARTS_NODES, CLOTHING_NODES, ORDER_COLLISION_NODES, make_taxonomy


@pytest.fixture
def clothing() -> Taxonomy:
    return make_taxonomy(CLOTHING_NODES, name="Clothing Tags")


@pytest.fixture
def bodyparts() -> Taxonomy:
    return make_taxonomy(BODYPARTS_NODES, name="Body Parts Tags")


@pytest.fixture
def order_collision() -> Taxonomy:
    return make_taxonomy(ORDER_COLLISION_NODES, name="Order Collision Test")
