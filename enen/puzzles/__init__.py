"""
enen Puzzles

Trial generators and the sequence automaton for the five puzzles.
"""

from enen.puzzles.composition import CompositionTrial
from enen.puzzles.mushroom import SizeTrial
from enen.puzzles.sampling import MAX_REJECTION_DRAWS, redraw_until
from enen.puzzles.sequence import Button, SequencePuzzle, SequenceState
from enen.puzzles.shapes import ShapeTrial, rank
from enen.puzzles.xor import XorTrial

__all__ = [
    # Generators
    "SizeTrial",
    "ShapeTrial",
    "XorTrial",
    "CompositionTrial",
    "rank",
    # Sequence automaton
    "Button",
    "SequencePuzzle",
    "SequenceState",
    # Sampling
    "MAX_REJECTION_DRAWS",
    "redraw_until",
]
