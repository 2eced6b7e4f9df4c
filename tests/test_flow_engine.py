"""Tests del motor de flujo puro (sin Qt)."""

import math

from tagcloud.core.flow_engine import (
    FlowItem,
    ItemSize,
    LayoutResult,
    RowCursor,
    clamp_dimension,
    compute_flow_layout,
    measure_padded,
)


def _items(*sizes):
    return [FlowItem(f"item{i + 1}", ItemSize(w, h)) for i, (w, h) in enumerate(sizes)]


def test_empty_input():
    result = compute_flow_layout([], 100)
    assert result.offsets == {}
    assert result.total_height == 0
    assert result.rows == []


def test_scenario_three_items_wrap_third():
    """50+50 caben en 120; el tercero (150 > 120) salta de fila."""
    result = compute_flow_layout(_items((50, 20), (50, 20), (50, 20)), 120)
    assert result.offsets["item1"] == (0, 0)
    assert result.offsets["item2"] == (50, 0)
    assert result.offsets["item3"] == (0, 20)
    assert result.total_height == 40
    assert result.rows == [["item1", "item2"], ["item3"]]


def test_scenario_single_oversized_item():
    result = compute_flow_layout(_items((200, 35)), 100)
    assert result.offsets["item1"] == (0, 0)
    assert result.total_height == 35
    assert result.row_count == 1


def test_scenario_five_equal_chips():
    """Cinco chips de 60x30 en 190: tres en la primera fila, dos en la segunda."""
    result = compute_flow_layout(_items(*[(60, 30)] * 5), 190)
    assert [result.offsets[f"item{i}"] for i in range(1, 6)] == [
        (0, 0), (60, 0), (120, 0), (0, 30), (60, 30)
    ]
    assert result.total_height == 60


def test_exact_fit_does_not_wrap():
    result = compute_flow_layout(_items((60, 10), (40, 10)), 100)
    assert result.offsets["item2"] == (60, 0)
    assert result.row_count == 1
    assert result.total_height == 10


def test_one_pixel_over_wraps():
    result = compute_flow_layout(_items((60, 10), (41, 10)), 100)
    assert result.offsets["item2"] == (0, 10)


def test_oversized_item_isolated_between_others():
    result = compute_flow_layout(_items((30, 10), (250, 40), (30, 10)), 100)
    assert result.offsets["item1"] == (0, 0)
    assert result.offsets["item2"] == (0, 10)
    assert result.offsets["item3"] == (0, 50)
    assert result.rows == [["item1"], ["item2"], ["item3"]]
    assert result.total_height == 60


def test_row_height_is_tallest_item():
    result = compute_flow_layout(_items((40, 10), (40, 25), (40, 15)), 90)
    assert result.offsets["item3"] == (0, 25)
    assert result.total_height == 40


def test_unknown_width_places_everything_at_origin():
    items = _items((50, 20), (50, 20))
    for width in (0, None, -10, float("nan"), float("inf")):
        result = compute_flow_layout(items, width)
        assert set(result.offsets.values()) == {(0, 0)}
        assert result.total_height == 0
        assert result.container_width == 0


def test_invalid_sizes_are_clamped():
    size = ItemSize(float("nan"), -5)
    assert size.width == 0.0
    assert size.height == 0.0

    result = compute_flow_layout(
        [FlowItem("a", ItemSize(-20, 10)), FlowItem("b", ItemSize(30, float("inf")))], 100
    )
    assert result.offsets == {"a": (0, 0), "b": (0, 0)}
    assert result.total_height == 10


def test_idempotent():
    items = _items((37, 12), (81, 30), (15, 9), (64, 22), (120, 18))
    first = compute_flow_layout(items, 130)
    second = compute_flow_layout(items, 130)
    assert first == second


def test_no_overflow_when_items_fit():
    widths = [13, 47, 29, 88, 5, 61, 33, 70, 21, 90, 44]
    items = _items(*[(w, 10 + w % 7) for w in widths])
    width = 100
    result = compute_flow_layout(items, width)
    for item in items:
        x, _ = result.offsets[item.key]
        assert x + item.size.width <= width


def test_order_preserved():
    widths = [30, 70, 45, 10, 90, 25, 55, 60]
    items = _items(*[(w, 12) for w in widths])
    result = compute_flow_layout(items, 110)
    positions = [(result.offsets[i.key][1], result.offsets[i.key][0]) for i in items]
    assert positions == sorted(positions)
    assert list(result.offsets) == [i.key for i in items]
    assert [key for row in result.rows for key in row] == [i.key for i in items]


def test_height_monotonic_when_appending():
    sizes = [(40, 10), (70, 25), (20, 5), (90, 30), (10, 40), (55, 15)]
    previous = 0
    for n in range(1, len(sizes) + 1):
        height = compute_flow_layout(_items(*sizes[:n]), 100).total_height
        assert height >= previous
        previous = height


def test_offset_for_unknown_key_defaults_to_origin():
    assert LayoutResult().offset_for("missing") == (0.0, 0.0)


def test_measure_padded_adds_spacing_each_side():
    padded = measure_padded(ItemSize(50, 20), 4, 3)
    assert padded == ItemSize(58, 26)
    assert measure_padded(ItemSize(50, 20), -4, float("nan")) == ItemSize(50, 20)


def test_row_cursor_wrap_and_advance():
    cursor = RowCursor()
    cursor.advance(ItemSize(30, 12))
    cursor.advance(ItemSize(20, 18))
    assert (cursor.x, cursor.y, cursor.row_height) == (50, 0, 18)
    cursor.wrap()
    assert (cursor.x, cursor.y, cursor.row_height) == (0, 18, 0)


def test_clamp_dimension():
    assert clamp_dimension(3) == 3.0
    assert clamp_dimension("7.5") == 7.5
    assert clamp_dimension("abc") == 0.0
    assert clamp_dimension(None) == 0.0
    assert clamp_dimension(-1) == 0.0
    assert clamp_dimension(math.nan) == 0.0
