"""
Visualization utilities.

- Level heatmaps of pattern trees
- Clear / Draw / Keep state maps across steps
"""

from termsweep.viz.fields import (
    classify_field,
    plot_field,
    plot_level_field,
    plot_steps,
    sample_field,
    save_figure,
)

__all__ = [
    "classify_field",
    "plot_field",
    "plot_level_field",
    "plot_steps",
    "sample_field",
    "save_figure",
]
