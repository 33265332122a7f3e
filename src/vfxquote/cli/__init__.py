"""Command-line interface for VFX Quote."""
