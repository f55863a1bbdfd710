from types import MappingProxyType

ANDROID_NAMESPACE = "http://schemas.android.com/apk/res/android"

SVG_ROOT = "svg"
SVG_PATH = "path"

SVG_WIDTH = "width"
SVG_HEIGHT = "height"
SVG_VIEW_BOX = "viewBox"

SVG_D = "d"
SVG_CLIP = "clip"
SVG_CLIP_RULE = "clip-rule"
SVG_FILL = "fill"
SVG_FILL_OPACITY = "fill-opacity"
SVG_FILL_RULE = "fill-rule"
SVG_STROKE = "stroke"
SVG_STROKE_OPACITY = "stroke-opacity"
SVG_STROKE_LINEJOIN = "stroke-linejoin"
SVG_STROKE_LINECAP = "stroke-linecap"
SVG_STROKE_WIDTH = "stroke-width"

# SVG nodes we refuse to convert, by category
UNSUPPORTED_SVG_NODES = frozenset(
    {
        # animation
        "animate",
        "animateColor",
        "animateMotion",
        "animateTransform",
        "mpath",
        "set",
        # container
        "a",
        "glyph",
        "marker",
        "missing-glyph",
        "pattern",
        "switch",
        "symbol",
        # filter primitives
        "feBlend",
        "feColorMatrix",
        "feComponentTransfer",
        "feComposite",
        "feConvolveMatrix",
        "feDiffuseLighting",
        "feDisplacementMap",
        "feFlood",
        "feFuncA",
        "feFuncB",
        "feFuncG",
        "feFuncR",
        "feGaussianBlur",
        "feImage",
        "feMerge",
        "feMergeNode",
        "feMorphology",
        "feOffset",
        "feSpecularLighting",
        "feTile",
        "feTurbulence",
        # font
        "font",
        "font-face",
        "font-face-format",
        "font-face-name",
        "font-face-src",
        "font-face-uri",
        "hkern",
        "vkern",
        # gradient
        "linearGradient",
        "radialGradient",
        "stop",
        # graphics
        "ellipse",
        "image",
        "text",
        # light sources
        "feDistantLight",
        "fePointLight",
        "feSpotLight",
        # text content
        "altGlyph",
        "altGlyphDef",
        "altGlyphItem",
        "glyphRef",
        "textPath",
        "tref",
        "tspan",
        # uncategorized
        "color-profile",
        "cursor",
        "filter",
        "foreignObject",
        "mask",
        "script",
        "view",
    }
)

# SVG presentation attribute -> vector drawable attribute
PRESENTATION_MAP = MappingProxyType(
    {
        SVG_CLIP: "android:clip",
        SVG_FILL: "android:fillColor",
        SVG_FILL_RULE: "android:fillType",
        SVG_FILL_OPACITY: "android:fillAlpha",
        SVG_STROKE: "android:strokeColor",
        SVG_STROKE_OPACITY: "android:strokeAlpha",
        SVG_STROKE_LINEJOIN: "android:strokeLineJoin",
        SVG_STROKE_LINECAP: "android:strokeLineCap",
        SVG_STROKE_WIDTH: "android:strokeWidth",
    }
)

FILL_RULE_VALUES = MappingProxyType({"nonzero": "nonZero", "evenodd": "evenOdd"})
