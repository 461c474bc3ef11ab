import pygame
import pytest

from sweepfield.boards.cell_visual import CellVisual, HeadlessCellVisual
from sweepfield.boards.field_layout import layout
from sweepfield.boards.visual import Position, Size, VisualProps, texture_key
from sweepfield.core.errors import InvalidCellState
from sweepfield.core.types import CellStatus, Content, ContentKind


def make_props(status=CellStatus.HIDDEN, content=Content.empty(0), **kw):
    return VisualProps(Position(10, 20), Size(30, 30), status, content, **kw)


def full(props):
    return dict(position=props.position, size=props.size,
                status=props.status, content=props.content)


def test_first_evaluation_always_updates():
    visual = HeadlessCellVisual(4)
    assert visual.should_component_update(make_props())
    assert visual.should_component_update(make_props(CellStatus.REVEALED, Content.mine()))


def test_identical_props_do_not_update():
    visual = HeadlessCellVisual(4)
    props = make_props()
    visual.set_props(**full(props))
    assert not visual.should_component_update(props)
    assert not visual.should_component_update(make_props())


@pytest.mark.parametrize("changed", [
    VisualProps(Position(11, 20), Size(30, 30), CellStatus.HIDDEN, Content.empty(0)),
    VisualProps(Position(10, 21), Size(30, 30), CellStatus.HIDDEN, Content.empty(0)),
    VisualProps(Position(10, 20), Size(31, 30), CellStatus.HIDDEN, Content.empty(0)),
    VisualProps(Position(10, 20), Size(30, 29), CellStatus.HIDDEN, Content.empty(0)),
    VisualProps(Position(10, 20), Size(30, 30), CellStatus.FLAGGED, Content.empty(0)),
    VisualProps(Position(10, 20), Size(30, 30), CellStatus.HIDDEN, Content.mine()),
    VisualProps(Position(10, 20), Size(30, 30), CellStatus.HIDDEN, Content.empty(3)),
])
def test_any_tracked_field_change_updates(changed):
    visual = HeadlessCellVisual(0)
    visual.set_props(**full(make_props()))
    assert visual.should_component_update(changed)


def test_set_props_merges_top_level_keys():
    visual = HeadlessCellVisual(1)
    visual.set_props(**full(make_props()))
    visual.set_props(status=CellStatus.REVEALED, content=Content.empty(2))

    assert visual.props.position == Position(10, 20)
    assert visual.props.size == Size(30, 30)
    assert visual.props.status is CellStatus.REVEALED
    assert visual.props.content == Content.empty(2)


def test_first_set_props_must_be_complete():
    with pytest.raises(TypeError):
        HeadlessCellVisual(1).set_props(status=CellStatus.HIDDEN)


def test_render_uses_latest_props():
    visual = HeadlessCellVisual(7)
    visual.set_props(**full(make_props()))
    visual.set_props(status=CellStatus.FLAGGED)
    visual.set_props(status=CellStatus.HIDDEN)
    visual.render()

    assert visual.rendered == [visual.props]
    assert visual.texture == "empty_not_selected"


@pytest.mark.parametrize("props,key,interactive", [
    (make_props(CellStatus.REVEALED, Content.mine()), "bomb", False),
    (make_props(CellStatus.REVEALED, Content.mine(), exploded=True), "bomb_exploded", False),
    (make_props(CellStatus.REVEALED, Content.empty(3)), "mark_3", False),
    (make_props(CellStatus.REVEALED, Content.empty(8)), "mark_8", False),
    (make_props(CellStatus.REVEALED, Content.empty(0)), "empty_selected", False),
    (make_props(CellStatus.HIDDEN, Content.mine()), "empty_not_selected", True),
    (make_props(CellStatus.FLAGGED, Content.empty(1)), "flagged", True),
])
def test_render_picks_texture_and_interactivity(props, key, interactive):
    visual = HeadlessCellVisual(12)
    visual.set_props(**full(props), exploded=props.exploded)
    visual.render()

    assert visual.texture == key
    assert visual.interactive is interactive
    assert visual.name == "12"
    assert visual.rect == pygame.Rect(10, 20, 30, 30)


def test_fractional_neighbours_share_an_edge():
    row = layout(1, 3, 100.5, 10, 0)[0]
    rects = []
    for cid, g in enumerate(row):
        visual = HeadlessCellVisual(cid)
        visual.set_props(position=Position(g.x, g.y), size=Size(g.width, g.height),
                         status=CellStatus.HIDDEN, content=Content.empty(0))
        visual.render()
        rects.append(visual.rect)

    assert [r.right for r in rects[:-1]] == [r.left for r in rects[1:]]
    assert not any(a.colliderect(b) for a, b in zip(rects, rects[1:]))


def test_both_visuals_share_props_bookkeeping(assets):
    assets.load_all()
    for visual in (HeadlessCellVisual(2), CellVisual(2, assets)):
        visual.set_props(**full(make_props()))
        assert not visual.should_component_update(make_props())
        visual.render()
        assert (visual.texture, visual.name, visual.interactive) == ("empty_not_selected", "2", True)


def test_unknown_content_is_invalid_state():
    with pytest.raises(InvalidCellState):
        texture_key(make_props(CellStatus.REVEALED, Content(ContentKind.EMPTY, 9)))


def test_render_before_set_props_is_invalid_state():
    with pytest.raises(InvalidCellState):
        HeadlessCellVisual(0).render()


def test_pygame_visual_draws_texture_at_position(assets):
    assets.load_all()
    visual = CellVisual(3, assets)
    visual.set_props(**full(make_props(CellStatus.FLAGGED)))
    visual.render()

    assert visual.image.get_size() == (30, 30)
    assert visual.texture == "flagged"
    assert visual.interactive

    target = pygame.Surface((100, 100))
    target.fill((0, 0, 0))
    visual.draw(target, origin=(5, 5))
    assert target.get_at((5 + 10 + 15, 5 + 20 + 15))[:3] != (0, 0, 0)
    assert target.get_at((2, 2))[:3] == (0, 0, 0)


def test_pygame_visual_rerender_switches_to_revealed(assets):
    assets.load_all()
    visual = CellVisual(3, assets)
    visual.set_props(**full(make_props()))
    visual.render()
    visual.set_props(status=CellStatus.REVEALED, content=Content.empty(2))
    visual.render()

    assert visual.texture == "mark_2"
    assert not visual.interactive
