"""Built-in element type table."""

from types import MappingProxyType
from typing import Mapping

from .schema import ComponentSchema, array, boolean, enum, number, string

ICON_NAMES = (
    "heart", "star", "cart", "user", "settings", "bell", "home", "search",
    "menu", "back", "send", "plus", "trash", "edit", "check", "close",
    "arrow-right", "arrow-left", "calendar", "clock", "dollar", "percent",
    "chart", "download", "upload", "share", "copy", "filter", "sort",
)

SIZE_SCALE = ("small", "medium", "large")
SPACING_SCALE = ("none", "small", "medium", "large")


def _components() -> list[ComponentSchema]:
    return [
        # ===== TEXT =====
        ComponentSchema(
            type_name="text",
            name="Text",
            description="Text content with various styles",
            props={
                "content": string(required=True, description="Text content"),
                "style": enum(
                    "heading", "subheading", "body", "muted", "label", "caption",
                    default="body", description="Text style/size",
                ),
            },
        ),
        # ===== INTERACTIVE =====
        ComponentSchema(
            type_name="button",
            name="Button",
            description="Clickable button",
            props={
                "content": string(required=True, description="Button label"),
                "variant": enum(
                    "primary", "secondary", "outline", "ghost", "danger",
                    default="primary", description="Button style variant",
                ),
                "size": enum("small", "medium", "large", "full", default="medium", description="Button size"),
                "icon": string(description="Optional icon name"),
            },
        ),
        ComponentSchema(
            type_name="input",
            name="Input",
            description="Text input field",
            props={
                "placeholder": string(default="Enter text...", description="Placeholder text"),
                "label": string(description="Optional label above input"),
                "icon": enum(
                    "search", "user", "mail", "lock", "phone", "calendar", "dollar",
                    description="Optional leading icon",
                ),
                "inputType": enum("text", "password", "email", "number", "textarea", default="text"),
            },
        ),
        ComponentSchema(
            type_name="toggle",
            name="Toggle",
            description="On/off switch",
            props={
                "label": string(required=True, description="Toggle label"),
                "checked": boolean(default=False),
            },
        ),
        # ===== MEDIA =====
        ComponentSchema(
            type_name="image",
            name="Image",
            description="Image placeholder",
            props={
                "label": string(default="Image", description="Image description"),
                "size": enum(
                    "avatar", "thumbnail", "small", "medium", "large", "banner", "full",
                    default="medium",
                ),
                "shape": enum("square", "rounded", "circle", default="rounded"),
            },
        ),
        ComponentSchema(
            type_name="icon",
            name="Icon",
            description="Icon with optional label",
            props={
                "name": enum(*ICON_NAMES, required=True),
                "label": string(description="Optional label next to icon"),
                "size": enum(*SIZE_SCALE, default="medium"),
            },
        ),
        # ===== LAYOUT =====
        ComponentSchema(
            type_name="box",
            name="Box",
            description="Container for grouping elements",
            props={
                "variant": enum(
                    "card", "row", "column", "highlight", "outline", "transparent",
                    default="card",
                ),
                "padding": enum(*SPACING_SCALE, default="medium"),
                "gap": enum(*SPACING_SCALE, default="medium"),
                "children": array(description="Nested elements"),
            },
        ),
        ComponentSchema(
            type_name="divider",
            name="Divider",
            description="Horizontal separator line",
            props={},
        ),
        ComponentSchema(
            type_name="spacer",
            name="Spacer",
            description="Vertical spacing",
            props={"size": enum("small", "medium", "large", "xlarge", default="medium")},
        ),
        # ===== COMPOSITE =====
        ComponentSchema(
            type_name="listItem",
            name="List Item",
            description="Row with icon, title, subtitle, and action",
            props={
                "title": string(required=True),
                "subtitle": string(),
                "leadingIcon": string(description="Icon name for left side"),
                "leadingImage": boolean(description="Show image placeholder instead of icon"),
                "trailingIcon": string(default="arrow-right"),
                "trailingText": string(description="Right-aligned text (e.g. price, time)"),
            },
        ),
        ComponentSchema(
            type_name="card",
            name="Card",
            description="Content card with optional image and actions",
            props={
                "title": string(required=True),
                "subtitle": string(),
                "description": string(),
                "image": boolean(default=True),
                "imagePosition": enum("top", "left", "right", default="left"),
                "badge": string(description="Optional badge text"),
                "action": string(description="Optional action button text"),
                "price": string(description="Optional price display"),
            },
        ),
        ComponentSchema(
            type_name="stat",
            name="Stat",
            description="Statistic display with value and label",
            props={
                "value": string(required=True, description='Main value (e.g. "$1,234")'),
                "label": string(required=True, description="Stat label"),
                "trend": enum("up", "down", "neutral", description="Optional trend indicator"),
                "trendValue": string(description='Trend value (e.g. "+12%")'),
            },
        ),
        ComponentSchema(
            type_name="badge",
            name="Badge",
            description="Small status pill",
            props={
                "content": string(required=True, description="Badge text"),
                "variant": enum("neutral", "success", "warning", "danger", default="neutral"),
            },
        ),
        # ===== NAVIGATION =====
        ComponentSchema(
            type_name="navbar",
            name="Navigation Bar",
            description="Bottom tab navigation",
            props={
                "items": array(
                    required=True,
                    description='Array of tab names (e.g. ["Home", "Search", "Profile"])',
                ),
                "active": number(default=0, description="Active tab index"),
            },
        ),
        ComponentSchema(
            type_name="header",
            name="Screen Header",
            description="Top header with title and optional actions",
            props={
                "title": string(required=True),
                "showBack": boolean(default=False),
                "rightAction": string(description="Right button text or icon"),
            },
        ),
        ComponentSchema(
            type_name="tabs",
            name="Tab Bar",
            description="Horizontal tab selection",
            props={
                "items": array(required=True),
                "active": number(default=0),
            },
        ),
    ]


COMPONENT_REGISTRY: Mapping[str, ComponentSchema] = MappingProxyType(
    {schema.type_name: schema for schema in _components()}
)
