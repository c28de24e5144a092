import pygame
import pytest

from serpentine.constants import Direction
from serpentine.tail import SegmentSprite, Tails
from serpentine.textures import TextureManager
from serpentine.utils import direction_from_to
from serpentine.vector2d import Vector2D

SIZE = 40


def _ready_tails(tmp_path, segments=3):
    textures = TextureManager()
    tails = Tails()
    tails.setup(
        textures,
        tmp_path / "body.png", "body",
        tmp_path / "last.png", "last",
        tmp_path / "curve.png", "curve",
        tmp_path / "curve_tail.png", "curve_tail",
        segments, SIZE,
    )
    return tails, textures


def test_setup_creates_segments_at_origin(tmp_path):
    tails, textures = _ready_tails(tmp_path, 4)
    assert tails.total_segments == 4
    assert all(tails.segment_position(i) == Vector2D(0, 0) for i in range(4))
    assert "body" not in textures


def test_setup_with_zero_segments_keeps_one(tmp_path):
    tails, _ = _ready_tails(tmp_path, 0)
    assert tails.total_segments == 1


def test_initialize_body_right_lines_up_behind_leader():
    tails = Tails()
    leader = Vector2D(200, 200)
    tails.initialize_body(leader, 0, 3, SIZE)
    assert tails.total_segments == 3
    chain = [leader] + [tails.segment_position(i) for i in range(3)]
    for a, b in zip(chain, chain[1:]):
        assert direction_from_to(a, b, SIZE) == Direction.LEFT
        assert (a - b) == Vector2D(SIZE, 0)


@pytest.mark.parametrize(
    "angle, expected",
    [(180, Direction.RIGHT), (270, Direction.DOWN), (-90, Direction.DOWN), (90, Direction.UP)],
)
def test_initialize_body_other_angles(angle, expected):
    tails = Tails()
    leader = Vector2D(200, 200)
    tails.initialize_body(leader, angle, 2, SIZE)
    assert direction_from_to(leader, tails.segment_position(0), SIZE) == expected
    assert direction_from_to(tails.segment_position(0), tails.segment_position(1), SIZE) == expected


def test_initialize_body_unknown_angle_stacks_on_leader():
    tails = Tails()
    leader = Vector2D(120, 80)
    tails.initialize_body(leader, 45, 3, SIZE)
    assert [tails.segment_position(i) for i in range(3)] == [leader] * 3


def test_initialize_body_non_positive_count_gives_one():
    tails = Tails()
    tails.initialize_body(Vector2D(200, 200), 0, -2, SIZE)
    assert tails.total_segments == 1


def test_move_body_shifts_segments():
    tails = Tails()
    tails.initialize_body(Vector2D(200, 200), 0, 3, SIZE)
    before = [tails.segment_position(i) for i in range(3)]
    new_head = Vector2D(240, 200)
    tails.move_body(new_head, 0)
    after = [tails.segment_position(i) for i in range(3)]
    assert after == [new_head, before[0], before[1]]
    assert tails.total_segments == 3


def test_move_body_on_empty_does_nothing():
    tails = Tails()
    tails.move_body(Vector2D(1, 1), 0)
    assert tails.total_segments == 0
    assert tails.sprites() == []


def test_grow_duplicates_last_segment():
    tails = Tails()
    tails.initialize_body(Vector2D(200, 200), 0, 3, SIZE)
    last = tails.segment_position(2)
    tails.grow()
    assert tails.total_segments == 4
    assert tails.segment_position(3) == last


def test_grow_on_empty_is_ignored():
    tails = Tails()
    tails.grow()
    assert tails.total_segments == 0


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_segment_position_out_of_range(index):
    tails = Tails()
    tails.initialize_body(Vector2D(200, 200), 0, 3, SIZE)
    with pytest.raises(IndexError):
        tails.segment_position(index)


def test_sprites_straight_line(tmp_path):
    tails, _ = _ready_tails(tmp_path)
    tails.initialize_body(Vector2D(200, 200), 0, 3, SIZE)
    sprites = tails.sprites()
    assert len(sprites) == 3
    assert sprites[0] == SegmentSprite("body", tails.segment_position(0), 0.0, None)
    assert sprites[1] == SegmentSprite("body", tails.segment_position(1), 180.0, None)
    assert sprites[2] == SegmentSprite("last", tails.segment_position(2), 180.0, None)


def test_sprites_curve_then_curved_tail(tmp_path):
    tails, _ = _ready_tails(tmp_path)
    tails.initialize_body(Vector2D(200, 200), 0, 3, SIZE)
    tails.move_body(Vector2D(200, 200), 270)

    first = tails.sprites()
    assert first[0].texture_id == "curve"
    assert first[0].src_rect == (SIZE * 2, 0, SIZE, SIZE)
    assert first[0].angle == 0.0
    assert first[2].texture_id == "last"

    tails.move_body(Vector2D(200, 160), 270)
    second = tails.sprites()
    assert second[0].texture_id == "body"
    assert second[0].angle == 270.0
    assert second[1] == SegmentSprite("curve", Vector2D(200, 200), 0.0, (0, 0, SIZE, SIZE))
    assert second[2] == SegmentSprite("curve_tail", tails.segment_position(2), 0.0, (0, 0, SIZE, SIZE))


def test_single_segment_uses_stored_angle(tmp_path):
    tails, _ = _ready_tails(tmp_path)
    tails.initialize_body(Vector2D(200, 200), 90, 1, SIZE)
    (sprite,) = tails.sprites()
    assert sprite.texture_id == "last"
    assert sprite.angle == 90.0


def _solid(color):
    image = pygame.Surface((SIZE, SIZE))
    image.fill(color)
    return image


def test_render_draws_body_and_tail(tmp_path):
    tails, textures = _ready_tails(tmp_path)
    textures.add("body", _solid((255, 0, 0)))
    textures.add("last", _solid((0, 0, 255)))
    tails.initialize_body(Vector2D(120, 40), 0, 3, SIZE)
    surface = pygame.Surface((200, 120))
    surface.fill((0, 0, 0))
    tails.render(surface, textures)
    first = tails.segment_position(0)
    last = tails.segment_position(2)
    assert surface.get_at((first.x + 5, first.y + 5))[:3] == (255, 0, 0)
    assert surface.get_at((last.x + 5, last.y + 5))[:3] == (0, 0, 255)


def test_render_without_setup_draws_nothing():
    tails = Tails()
    textures = TextureManager()
    textures.add("", _solid((255, 255, 255)))
    tails.initialize_body(Vector2D(120, 40), 0, 3, SIZE)
    surface = pygame.Surface((200, 120))
    surface.fill((0, 0, 0))
    tails.render(surface, textures)
    assert surface.get_at((85, 45))[:3] == (0, 0, 0)
    assert all(sprite.texture_id == "" for sprite in tails.sprites())