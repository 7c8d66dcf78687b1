"""Theme colors and color utilities for the UI."""


class DarkColors:
    """Dark palette (slate grays with a blue accent)."""

    BG = "#111827"
    SURFACE = "#1f2937"
    BORDER = "#374151"

    TEXT = "#d1d5db"
    TEXT_BRIGHT = "#ffffff"
    TEXT_MUTED = "#9ca3af"

    PRIMARY = "#2563eb"
    PRIMARY_DARK = "#1d4ed8"

    ERROR = "#ef4444"
    SUCCESS = "#22c55e"


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b.

    Anything that is not a pair of #RRGGBB strings returns *a* unchanged.
    """
    a = a.strip()
    b = b.strip()
    if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
        return a
    try:
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        t = max(0.0, min(1.0, float(t)))
    except ValueError:
        return a
    r = int(ar + (br - ar) * t)
    g = int(ag + (bg - ag) * t)
    bl = int(ab + (bb - ab) * t)
    return f"#{r:02X}{g:02X}{bl:02X}"
