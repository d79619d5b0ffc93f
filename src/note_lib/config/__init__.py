"""
Tuning configuration - reference pitches for frequency conversion.

Tunings are small YAML files. A library of common ones ships with the
package and a project directory can override or extend it.
"""

from note_lib.config.loader import TuningLoader
from note_lib.config.tuning import CONCERT_PITCH, Tuning

__all__ = [
    "CONCERT_PITCH",
    "Tuning",
    "TuningLoader",
]
