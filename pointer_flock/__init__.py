"""
Pointer-driven flocking simulation.
"""

import os

# pygame prints a banner on import otherwise
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

__version__ = "0.1.0"
