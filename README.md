# tilearcade

tilearcade is a launcher for a set of small game scenes. Its start screen is a
4×4 grid of coloured tiles, one tile per game slot. Switching from one scene to
another fades the screen out and back in.

## Installing and running

```
pip install .
tilearcade
```

By default it runs fullscreen. The options are:

- `--windowed`: run in a 960×540 window instead.
- `--assets DIR`: the assets directory. The default is `assets`, relative to the
  current directory.

Scenes are drawn at 1920×1080 and scaled to fit the window. **ESC** quits, except
in the last slot (see below). Closing the window also quits.

## The menu

- **Left click** a tile to switch to that slot's scene.
- **Right-drag** a tile to a new place to reorder the grid. The order is written to
  `<assets>/menu/indices.bin` when you leave the menu, one byte per tile. It is read
  back the next time the menu opens. If the file is missing, the tiles are shown in
  order 0 to 15.
- Tile captions are the first line of `<assets>/gameNN/title.txt`, where `NN` runs
  from `00` to `15`. A missing file gives an empty caption.

## The scenes

- **Slots GAME00 to GAME14**: placeholder scenes. Each shows its name, and
  **ENTER** returns to the menu.
- **Slot GAME15**: shows the time of the last frame. **ESC** returns to the menu
  instead of quitting.

## What it does not do

The shooting game is not in the package yet, so its slot (GAME04) is a
placeholder. Its building blocks are in `tilearcade.entities`:

- `Player` moves with W/A/S/D, cannot climb into the upper half of the screen, and
  stays on screen.
- `Enemy` slides from side to side.
- `EnemyBullet` flies, bounces off the side walls, and vanishes past the top or
  bottom of the screen.

Nothing yet puts these together into a playable scene. There is no sound.

## Using the pieces

The scene logic does no drawing of its own and runs without a window:

- `tilearcade.app.App` holds the current scene and runs it one frame at a time
  through `App.step`. `App.set_next_game` and `App.back_to_menu` request a switch,
  which happens once the fade-out has finished.
- `App.step` takes a `tilearcade.frame.Frame`. A frame carries an `InputState`, a
  `Canvas` that records draw commands, the frame time and the mouse position.
- `tilearcade.factory.GameFactory` builds the scene for a `GameId`.
- `tilearcade.transition.TransitionEffect` is the fade.
- `tilearcade.window.render` draws a canvas onto a pygame surface.

For example, `tilearcade.menu.move_tile` applies the menu's drag-and-drop
reordering to a plain list and returns a new list:

```python
from tilearcade.menu import move_tile

order = [0, 1, 2, 3]
move_tile(order, 3, 0)   # returns [3, 0, 1, 2]; order is unchanged
```

## Tests

```
pip install .[test]
pytest
```