"""VFX Quote — cost estimation for visual-effects shots and projects."""

__version__ = "0.1.0"
