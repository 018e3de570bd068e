"""Shared style constants for NowPlaying."""

COLORS = {
    "accent": "#3b82f6",
    "primary": "#ffffff",
    "highlight": "#93c5fd",
    "background": "#000000",
    "surface": "#1c1c1e",
    "muted": "#8e8e93",
    "dim": "#555555",
    "inactive": "#333333",
}

COLOR_ACCENT = COLORS["accent"]
COLOR_PRIMARY = COLORS["primary"]
COLOR_HIGHLIGHT = COLORS["highlight"]
COLOR_BACKGROUND = COLORS["background"]
COLOR_SURFACE = COLORS["surface"]
COLOR_MUTED = COLORS["muted"]
COLOR_DIM = COLORS["dim"]
COLOR_INACTIVE = COLORS["inactive"]
