"""QSS stylesheet and state colours for RadialClock."""

from __future__ import annotations

from ..timer.engine import ClockState

# ── state colors (ring gradient pairs) ───────────────────────────────────
#    Each state maps to (primary, secondary) for the conical gradient.

STATE_COLORS: dict[ClockState, tuple[str, str]] = {
    ClockState.READY:   ("#4A4A5E", "#3A3A4E"),   # neutral dim
    ClockState.RUNNING: ("#FF6B6B", "#FFA07A"),   # warm coral
    ClockState.PAUSED:  ("#6C7086", "#585B70"),   # desaturated gray
    ClockState.ENDED:   ("#F9E2AF", "#FAB387"),   # gong gold
}

STATE_LABELS: dict[ClockState, str] = {
    ClockState.READY:   "READY",
    ClockState.RUNNING: "RUNNING",
    ClockState.PAUSED:  "PAUSED",
    ClockState.ENDED:   "TIME'S UP",
}

PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "surface":      "#2A2A4A",
    "accent":       "#CBA6F7",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "border":       "#313154",
}


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    """Application-wide QSS built from *palette*."""
    p = dict(PALETTE)
    if palette:
        p.update(palette)
    return f"""
    QWidget {{
        background-color: {p["bg"]};
        color: {p["text"]};
        font-size: 14px;
    }}
    QFrame#card {{
        background-color: {p["surface"]};
        border: 1px solid {p["border"]};
        border-radius: 16px;
    }}
    QLineEdit#durationInput {{
        background-color: {p["bg"]};
        border: 1px solid {p["border"]};
        border-radius: 8px;
        padding: 6px 10px;
        font-size: 18px;
    }}
    QLineEdit#durationInput:focus {{
        border-color: {p["accent"]};
    }}
    QPushButton {{
        background-color: {p["surface"]};
        border: 1px solid {p["border"]};
        border-radius: 8px;
        padding: 6px 12px;
    }}
    QPushButton:hover {{
        border-color: {p["accent"]};
    }}
    QPushButton#primaryButton {{
        background-color: {p["accent"]};
        color: {p["bg"]};
        font-weight: bold;
        padding: 10px 28px;
    }}
    QLabel#mutedLabel {{
        color: {p["text_muted"]};
        font-size: 12px;
    }}
    """
