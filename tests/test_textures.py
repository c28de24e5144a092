import pygame

from serpentine.textures import TextureManager

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
EMPTY = (0, 0, 0, 0)


def _surface(size=(100, 100)):
    return pygame.Surface(size, pygame.SRCALPHA)


def _split_horizontal(width=20, height=20):
    """Left half red, right half blue."""
    image = _surface((width, height))
    image.fill(RED, pygame.Rect(0, 0, width // 2, height))
    image.fill(BLUE, pygame.Rect(width // 2, 0, width - width // 2, height))
    return image


def _split_vertical(size=20):
    """Top half red, bottom half blue."""
    image = _surface((size, size))
    image.fill(RED, pygame.Rect(0, 0, size, size // 2))
    image.fill(BLUE, pygame.Rect(0, size // 2, size, size - size // 2))
    return image


def test_draw_unknown_id_returns_false():
    textures = TextureManager()
    assert textures.draw("missing", _surface(), 0, 0, 10, 10) is False


def test_draw_fills_destination_only():
    textures = TextureManager()
    solid = _surface((20, 20))
    solid.fill(RED)
    textures.add("solid", solid)
    target = _surface()
    assert textures.draw("solid", target, 10, 10, 20, 20) is True
    assert tuple(target.get_at((15, 15))) == RED
    assert tuple(target.get_at((5, 5))) == EMPTY
    assert tuple(target.get_at((30, 30))) == EMPTY


def test_draw_scales_to_size():
    textures = TextureManager()
    solid = _surface((4, 4))
    solid.fill(BLUE)
    textures.add("small", solid)
    target = _surface()
    textures.draw("small", target, 0, 0, 40, 40)
    assert tuple(target.get_at((39, 39))) == BLUE


def test_flip_x_swaps_halves():
    textures = TextureManager()
    textures.add("split", _split_horizontal())
    target = _surface()
    textures.draw("split", target, 0, 0, 20, 20, flip_x=True)
    assert tuple(target.get_at((2, 10))) == BLUE
    assert tuple(target.get_at((17, 10))) == RED


def test_rotation_is_clockwise():
    textures = TextureManager()
    textures.add("split", _split_vertical())
    target = _surface()
    textures.draw("split", target, 0, 0, 20, 20, angle=90)
    assert tuple(target.get_at((17, 10))) == RED
    assert tuple(target.get_at((2, 10))) == BLUE


def test_src_rect_selects_part():
    textures = TextureManager()
    textures.add("sheet", _split_horizontal(40, 20))
    target = _surface()
    textures.draw("sheet", target, 0, 0, 20, 20, src_rect=(20, 0, 20, 20))
    assert tuple(target.get_at((5, 5))) == BLUE


def test_draw_frame_picks_cell():
    textures = TextureManager()
    textures.add("sheet", _split_horizontal(40, 20))
    target = _surface()
    assert textures.draw_frame("sheet", target, 0, 0, 20, 20, 1, 1) is True
    assert tuple(target.get_at((10, 10))) == BLUE
    textures.draw_frame("sheet", target, 0, 0, 20, 20, 1, 0)
    assert tuple(target.get_at((10, 10))) == RED


def test_draw_frame_unknown_id():
    textures = TextureManager()
    assert textures.draw_frame("nothing", _surface(), 0, 0, 20, 20, 1, 0) is False


def test_load_and_contains(tmp_path):
    path = tmp_path / "tile.bmp"
    image = pygame.Surface((8, 8))
    image.fill((255, 0, 0))
    pygame.image.save(image, str(path))
    textures = TextureManager()
    assert textures.load(path, "tile") is True
    assert "tile" in textures
    target = _surface()
    textures.draw("tile", target, 0, 0, 8, 8)
    assert tuple(target.get_at((4, 4)))[:3] == (255, 0, 0)


def test_load_missing_file_fails(tmp_path):
    textures = TextureManager()
    assert textures.load(tmp_path / "nope.png", "nope") is False
    assert "nope" not in textures


def test_clear_removes_all():
    textures = TextureManager()
    textures.add("a", _surface((2, 2)))
    textures.add("b", _surface((2, 2)))
    textures.clear()
    assert "a" not in textures
    assert "b" not in textures
    assert textures.draw("a", _surface(), 0, 0, 2, 2) is False