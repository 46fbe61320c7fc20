from deckplan import CargoItem, CollisionChecker, Dimensions, LoadSurface, PlacedItem


def _placed(item_id: str, x: float, y: float, length: float = 2.0, width: float = 1.0, rotated=False):
    item = CargoItem(
        id=item_id,
        brand="JLG",
        model="1930ES",
        category="electric_scissor",
        dimensions=Dimensions(length, width, 2.0),
        weight=1200,
    )
    return PlacedItem(item=item, position_x=x, position_y=y, rotated=rotated)


def test_identical_footprints_collide():
    a = _placed("A", 1.0, 0.5)
    b = _placed("B", 1.0, 0.5)
    collisions = CollisionChecker().find_collisions([a, b])
    assert len(collisions) == 1
    assert collisions[0].ids == {"A", "B"}
    assert collisions[0].description == "Collision between A and B"


def test_collision_relation_is_symmetric():
    checker = CollisionChecker()
    pairs = [
        (_placed("A", 0.0, 0.0), _placed("B", 1.5, 0.5)),
        (_placed("A", 0.0, 0.0), _placed("B", 2.0, 0.0)),
        (_placed("A", 0.0, 0.0, rotated=True), _placed("B", 0.5, 1.5)),
    ]
    for a, b in pairs:
        assert checker.overlap(a, b) == checker.overlap(b, a)


def test_disjoint_x_intervals_never_collide():
    checker = CollisionChecker()
    a = _placed("A", 0.0, 0.0)
    for y in (-1.0, 0.0, 0.3, 5.0):
        b = _placed("B", 3.0, y)
        assert not checker.overlap(a, b)
        assert checker.find_collisions([a, b]) == []


def test_touching_edges_do_not_collide():
    checker = CollisionChecker()
    assert not checker.overlap(_placed("A", 0.0, 0.0), _placed("B", 2.0, 0.0))
    assert not checker.overlap(_placed("A", 0.0, 0.0), _placed("B", 0.0, 1.0))


def test_rotation_changes_footprint_used_for_overlap():
    checker = CollisionChecker()
    b = _placed("B", 0.5, 1.5)
    assert checker.overlap(_placed("A", 0.0, 0.0), b) is False
    assert checker.overlap(_placed("A", 0.0, 0.0, rotated=True), b) is True


def test_colliding_ids_collects_every_member():
    items = [_placed("A", 0.0, 0.0), _placed("B", 1.0, 0.5), _placed("C", 5.0, 0.0)]
    assert CollisionChecker().colliding_ids(items) == {"A", "B"}


def test_out_of_bounds_reports_overhang():
    surface = LoadSurface(length=6.0, width=2.6, capacity_tons=20.0)
    items = [_placed("A", 5.0, 0.0), _placed("B", 1.0, 2.0), _placed("C", 1.0, 0.5)]
    overhangs = CollisionChecker().out_of_bounds(items, surface)
    assert [entry.item_id for entry in overhangs] == ["A", "B"]
    assert "length" in overhangs[0].description
    assert "width" in overhangs[1].description
