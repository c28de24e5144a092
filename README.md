# serpentine

A grid-based snake arcade game built on pygame. Steer the snake around a
20 × 15 board of 40-pixel cells, eat food to grow, and avoid running into your
own tail. The board wraps at the edges, so leaving one side brings you back on
the other.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
serpentine
```

This opens an 800 × 600 window titled "Snake Game". The game looks for its
images, sounds and `font.ttf` in the current working directory:

- `font.ttf` is required; if it cannot be loaded the game exits with status 1.
- Images: `snake.png`, `body.png`, `last_tail.png`, `curve.png`,
  `curve_tail.png`, `normalfood.png`, `speedfood.png`, `pause_icon.png`,
  `Mute Button unmuted1.png`, `Mute Button muted1.png`. A missing image is
  logged and skipped. The pause and mute buttons are then drawn as plain grey
  squares (the pause button with two white bars); other pieces without an
  image are not drawn.
- Sounds: `background_music.mp3`, `eat_food.wav`, `game_over.wav`,
  `click.wav`. Missing sounds are logged and the game plays on silently. If no
  audio device is available, the game runs without sound.

### Controls

| Screen    | Input                         | Effect                          |
|-----------|-------------------------------|---------------------------------|
| Menu      | Enter                         | Start playing                   |
| Menu      | Click the speaker icon        | Mute or unmute all sound        |
| Playing   | Arrow keys                    | Turn (no instant reversal)      |
| Playing   | P, or click the pause icon    | Pause                           |
| Paused    | P                             | Resume                          |
| Paused    | Esc                           | Open the options menu           |
| Paused    | RESUME / REPLAY / OPTIONS     | Resume, restart, or options     |
| Options   | `-` / `+` buttons             | Music and effects volume ±10 %  |
| Options   | Esc, Backspace, or Back       | Return to the pause menu        |
| Game over | Click CHOI LAI                | Play again                      |
| Game over | M                             | Back to the main menu           |

### Scoring

Ordinary food is worth 10 points. After each meal there is a one-in-seven
chance that the next food is a speed-boost food, worth 20 points, which halves
the snake's step delay for three seconds; a bar in the bottom-right corner
shows the time left.

When a game ends, the score is added to `highscores.dat` in the working
directory, which keeps the ten best scores as little-endian 32-bit integers.
The game records scores there but does not display the table.

## Using the pieces

The game logic works without a window, which makes it easy to script or test:

```python
from serpentine.snake import Snake
from serpentine.highscores import HighScoreManager

snake = Snake(clock=lambda: 0)
snake.reset()
print(snake.head_position)        # Vector2D(x=200, y=200)
print(snake.tails.total_segments) # 3

scores = HighScoreManager("scores.dat")
scores.add_score(120)
print(scores.high_score)
print(scores.scores)
```

Modules:

- `serpentine.constants` – screen and grid sizes, `GameState`, `Direction`.
- `serpentine.vector2d` – the immutable integer `Vector2D`.
- `serpentine.utils` – `direction_from_to`, `direction_to_angle`,
  `angle_to_direction`.
- `serpentine.food` – `Food` and `FoodType`.
- `serpentine.tail` – `Tails`, the segments behind the head, and
  `SegmentSprite`, which describes how each segment is drawn.
- `serpentine.snake` – `Snake`: movement, steering, growth, collisions and
  the speed boost.
- `serpentine.highscores` – `HighScoreManager`.
- `serpentine.audio` – `AudioManager` for sounds, music, volume and mute.
- `serpentine.textures` – `TextureManager`, a registry of named images.
- `serpentine.screens` – button layouts and `ScreenRenderer` for the menus
  and HUD.
- `serpentine.game` – `Game`, the state machine and main loop, and `main`,
  the entry point of the `serpentine` command.

`Game` takes optional `audio`, `highscores`, `clock` and `rng` arguments, and
its `handle_key`, `handle_click` and `update` methods can be driven directly
without opening a window; `render` needs `init` to have succeeded first.