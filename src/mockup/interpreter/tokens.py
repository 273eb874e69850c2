"""Design tokens shared by both back ends."""

from types import MappingProxyType

# RGB in 0..1, keyed by token name
COLORS = MappingProxyType({
    "primary": (0.545, 0.361, 0.965),      # #8B5CF6
    "secondary": (0.024, 0.714, 0.831),    # #06B6D4
    "background": (0.094, 0.094, 0.106),   # #18181B
    "surface": (0.149, 0.149, 0.161),      # #262629
    "text": (1.0, 1.0, 1.0),               # #FFFFFF
    "textMuted": (0.443, 0.443, 0.478),    # #71717A
    "border": (0.212, 0.212, 0.224),       # #363639
    "positive": (0.133, 0.773, 0.369),     # #22C55E
    "negative": (0.937, 0.267, 0.267),     # #EF4444
    "warning": (0.961, 0.620, 0.043),      # #F59E0B
})

SPACING = MappingProxyType({
    "none": 0,
    "xs": 4,
    "sm": 8,
    "md": 16,
    "lg": 24,
    "xl": 32,
})

RADIUS = MappingProxyType({
    "sm": 8,
    "md": 12,
    "lg": 16,
    "xl": 20,
})

# style name -> (font size, font weight)
TEXT_STYLES = MappingProxyType({
    "heading": (24, "Bold"),
    "subheading": (18, "Semi Bold"),
    "body": (14, "Regular"),
    "muted": (12, "Regular"),
    "label": (11, "Medium"),
    "caption": (11, "Regular"),
})

MUTED_STYLES = frozenset({"muted", "label"})

FONT_WEIGHTS = ("Regular", "Medium", "Semi Bold", "Bold")

# size name -> (width, height)
IMAGE_SIZES = MappingProxyType({
    "avatar": (40, 40),
    "thumbnail": (64, 64),
    "small": (48, 48),
    "medium": (72, 72),
    "large": (100, 100),
    "banner": (353, 140),
    "full": (353, 200),
})

SPACER_SIZES = MappingProxyType({
    "small": 8,
    "medium": 16,
    "large": 28,
    "xlarge": 40,
})

ICON_SIZES = MappingProxyType({
    "small": 16,
    "medium": 20,
    "large": 28,
})

# box padding/gap enum -> spacing token
GAP_SCALE = MappingProxyType({
    "none": SPACING["none"],
    "small": SPACING["sm"],
    "medium": SPACING["md"],
    "large": SPACING["lg"],
})

NAV_ICONS = MappingProxyType({
    "Home": "home",
    "Search": "search",
    "Cart": "cart",
    "Profile": "user",
    "Settings": "settings",
    "Chat": "send",
    "Help": "bell",
    "Orders": "cart",
    "Activity": "bell",
    "Messages": "mail",
})

BADGE_COLORS = MappingProxyType({
    "neutral": "textMuted",
    "success": "positive",
    "warning": "warning",
    "danger": "negative",
})
