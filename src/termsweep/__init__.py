"""
termsweep: full-screen terminal transitions driven by scalar fields.

A procedurally generated field sweeps across the terminal grid. Every cell
resolves to one of three instructions per frame:
- Keep: leave whatever is on screen
- Draw: print a glyph in a color
- Clear: blank the cell

Layers:
- core: vectors and the per-frame cell grid
- patterns: composable level fields (base shapes + decorators)
- sampling: glyph/color conversion of levels
- terminal: ANSI commands and the diffing surface
- engine: renderer, drift-correcting timer and the frame runner
"""

__version__ = "0.1.0"
