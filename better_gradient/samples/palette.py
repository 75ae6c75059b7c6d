# Shades 500 and 900 of the playground color families
SAMPLE_PALETTE = {
    "black": "#000000",
    "white": "#ffffff",
    "red": {"500": "#ef4444", "900": "#7f1d1d"},
    "orange": {"500": "#f97316", "900": "#7c2d12"},
    "amber": {"500": "#f59e0b", "900": "#78350f"},
    "yellow": {"500": "#eab308", "900": "#713f12"},
    "lime": {"500": "#84cc16", "900": "#365314"},
    "green": {"500": "#22c55e", "900": "#14532d"},
    "emerald": {"500": "#10b981", "900": "#064e3b"},
    "teal": {"500": "#14b8a6", "900": "#134e4a"},
    "cyan": {"500": "#06b6d4", "900": "#164e63"},
    "sky": {"500": "#0ea5e9", "900": "#0c4a6e"},
    "blue": {"500": "#3b82f6", "900": "#1e3a8a"},
    "indigo": {"500": "#6366f1", "900": "#312e81"},
    "violet": {"500": "#8b5cf6", "900": "#4c1d95"},
    "purple": {"500": "#a855f7", "900": "#581c87"},
    "fuchsia": {"500": "#d946ef", "900": "#701a75"},
    "pink": {"500": "#ec4899", "900": "#831843"},
    "rose": {"500": "#f43f5e", "900": "#881337"},
    "slate": {"500": "#64748b", "900": "#0f172a"},
}

__all__ = ["SAMPLE_PALETTE"]
