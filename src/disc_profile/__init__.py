"""
DISC Profile - Behavioral profile questionnaire based on the DISC model.

This package provides tools to:
- Present a fixed bank of forced-choice questions
- Classify answers into a D/I/S/C trait distribution
- Look up narrative feedback for the resulting primary/secondary profile
- Record attempts remotely or in a local database
"""

__version__ = "0.1.0"
__author__ = "DISC Profile Team"

from disc_profile.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
