import pytest

from polkicon.colors import Color

ALICE = bytes([
    212, 53, 147, 199, 21, 253, 211, 28, 97, 20, 26, 189, 4, 169, 159, 214, 130, 44, 133, 88,
    133, 76, 205, 227, 154, 86, 132, 231, 165, 109, 162, 125,
])
BOB = bytes([
    142, 175, 4, 21, 22, 135, 115, 99, 38, 201, 254, 161, 126, 37, 252, 82, 135, 97, 54, 147,
    201, 18, 144, 156, 178, 38, 170, 71, 148, 242, 106, 72,
])
ALICE_HEX = "d43593c715fdd31c61141abd04a99fd6822c8558854ccde39a5684e7a56da27d"
ALICE_BASE58 = "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY"
BOB_HEX = "8eaf04151687736326c9fea17e25fc5287613693c912909cb226aa4794f26a48"
BOB_BASE58 = "5FHneW46xGXgs5mUiveU4sbTyGBzmstUspZC92UhjJM694ty"


def _colors(triples):
    return [Color(r, g, b, 255) for r, g, b in triples]


ALICE_COLORS = _colors([
    (165, 227, 156), (60, 40, 17), (184, 68, 202), (139, 39, 88), (135, 68, 202),
    (225, 156, 227), (139, 39, 88), (135, 68, 202), (184, 68, 202), (165, 227, 156),
    (60, 40, 17), (162, 202, 68), (39, 139, 139), (187, 202, 68), (38, 60, 17),
    (39, 139, 139), (187, 202, 68), (162, 202, 68), (61, 39, 139),
])
BOB_COLORS = _colors([
    (58, 120, 61), (200, 214, 169), (214, 169, 182), (36, 52, 25), (127, 93, 177),
    (214, 169, 182), (58, 120, 61), (200, 214, 169), (52, 25, 30), (113, 177, 93),
    (58, 120, 114), (58, 120, 108), (118, 93, 177), (25, 52, 39), (58, 120, 108),
    (113, 177, 93), (58, 120, 114), (52, 25, 30), (33, 25, 52),
])

# 19 distinct colors, easy to tell apart in rendered output
DISTINCT_COLORS = [Color(10 * i, 5 * i, 255 - 10 * i, 255) for i in range(19)]


@pytest.fixture
def distinct_colors():
    return list(DISTINCT_COLORS)
