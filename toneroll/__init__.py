"""Render hymn-like melodies with additive synthesis to WAV files or speakers."""
