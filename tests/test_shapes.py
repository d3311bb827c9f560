from jet_stack.env.shapes import SHAPES, WELL_WIDTH, in_bounds, is_bit_set


def test_catalog_order_and_sizes():
    assert [s.name for s in SHAPES] == ["minus", "plus", "corner", "bar", "square"]
    assert [(s.width, s.height) for s in SHAPES] == [(4, 1), (3, 3), (3, 3), (1, 4), (2, 2)]


def test_masks_fit_declared_size():
    for shape in SHAPES:
        assert len(shape.masks) == 4
        used = [m for m in shape.masks if m]
        assert len(used) == shape.height
        for mask in shape.masks:
            # Nothing right of the declared width.
            assert mask & ((1 << (8 - shape.width)) - 1) == 0
        assert any(m & (1 << (8 - shape.width)) for m in shape.masks)


def test_is_bit_set_is_msb_first():
    assert is_bit_set(0b10000000, 0)
    assert is_bit_set(0b00000010, 6)
    assert not is_bit_set(0b00000001, 6)


def test_in_bounds():
    minus = SHAPES[0]
    assert in_bounds(minus, 0)
    assert in_bounds(minus, WELL_WIDTH - 4)
    assert not in_bounds(minus, WELL_WIDTH - 3)
    assert not in_bounds(minus, -1)
