"""Data model, scanners and ports; no I/O."""
