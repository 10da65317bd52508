"""
rubiks: a Rubik's-cube puzzle model with layer turns and perspective projection

The package is split into a pure core and a thin driver:
- core: value types (colors, axes, moves, cells), errors and configuration
- model: the cube state, the layer rotation engine, move sampling and
  move-history utilities
- view: vector/matrix algebra and the projection pipeline that turns a cube
  into depth-ordered polygons
- game / runner / cli: the state bundle a driving loop passes around, a
  seeded scramble session and the command line

Example Usage:
```python
from rubiks import Axis, Cube, Move, Rotation, rotate

cube = Cube.solved(3)
turned = rotate(cube, Move(Axis.Z, Rotation.POS90, 0))
assert rotate(turned, Move(Axis.Z, Rotation.NEG90, 0)) == cube
```

Command-line Usage:
```bash
rubiks create-config --output config.yaml
rubiks scramble --config config.yaml --moves 25
rubiks render --config config.yaml --play "Z+0 X-2" --format json
```
"""

from rubiks.core.base import (
    Axis, Cell, Color, CubeError, DimensionError, InvalidMoveError, Locus, Move,
    Pole, ProjectionError, Rotation,
)
from rubiks.core.config import Config, load_config, validate_config
from rubiks.model.cube import Cube
from rubiks.model.rotation import rotate, rotate_all
from rubiks.model.sampling import RandomSource, random_move
from rubiks.view.projection import (
    Drawable, Square, cube_to_squares, is_facing_viewer, position_cube, project,
    render_order,
)

__version__ = "0.1.0"

__all__ = [
    "Axis",
    "Cell",
    "Color",
    "Config",
    "Cube",
    "CubeError",
    "DimensionError",
    "Drawable",
    "InvalidMoveError",
    "Locus",
    "Move",
    "Pole",
    "ProjectionError",
    "RandomSource",
    "Rotation",
    "Square",
    "cube_to_squares",
    "is_facing_viewer",
    "load_config",
    "position_cube",
    "project",
    "random_move",
    "render_order",
    "rotate",
    "rotate_all",
    "validate_config",
]
