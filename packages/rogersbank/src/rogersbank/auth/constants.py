"""Fixed request headers and the browser fingerprint sent when logging in."""

import json

DEFAULT_BRAND_ID = "ROGERSBRAND"

TWO_FACTOR_REQUIRED_STATUS = 412
TWO_FACTOR_REQUIRED_TITLE = "Device Not Found"

JSON_HEADERS = {
    "Content-Type": "application/json",
    "Accept": "application/json",
    "Datatype": "json",
}


def authentication_headers(brand_id: str = DEFAULT_BRAND_ID) -> dict[str, str]:
    """Headers of the credential submission and code validation requests."""
    return {**JSON_HEADERS, "Brand_id": brand_id, "Sourcetype": "web"}


# Fingerprint of a desktop browser, sent as an opaque string
DEFAULT_DEVICE_INFO = json.dumps(
    [
        {"key": "language", "value": "en-US"},
        {"key": "color_depth", "value": 30},
        {"key": "device_memory", "value": 8},
        {"key": "hardware_concurrency", "value": 10},
        {"key": "resolution", "value": [1728, 1117]},
        {"key": "available_resolution", "value": [1728, 1005]},
        {"key": "timezone_offset", "value": 420},
        {"key": "session_storage", "value": 1},
        {"key": "local_storage", "value": 1},
        {"key": "indexed_db", "value": 1},
        {"key": "cpu_class", "value": "unknown"},
        {"key": "navigator_platform", "value": "MacIntel"},
        {
            "key": "regular_plugins",
            "value": [
                "PDF Viewer::Portable Document Format::application/pdf~pdf,text/pdf~pdf",
                "Chrome PDF Viewer::Portable Document Format::application/pdf~pdf,text/pdf~pdf",
                "Chromium PDF Viewer::Portable Document Format::application/pdf~pdf,text/pdf~pdf",
                "WebKit built-in PDF::Portable Document Format::application/pdf~pdf,text/pdf~pdf",
            ],
        },
        {
            "key": "webgl_vendor",
            "value": "Google Inc. (Apple)~ANGLE (Apple, ANGLE Metal Renderer: "
            "Apple M1 Pro, Unspecified Version)",
        },
        {"key": "adblock", "value": False},
        {"key": "has_lied_languages", "value": False},
        {"key": "has_lied_resolution", "value": False},
        {"key": "has_lied_os", "value": False},
        {"key": "has_lied_browser", "value": False},
        {"key": "touch_support", "value": [0, False, False]},
        {
            "key": "js_fonts",
            "value": [
                "Arial",
                "Arial Black",
                "Arial Hebrew",
                "Arial Narrow",
                "Arial Rounded MT Bold",
                "Arial Unicode MS",
                "Comic Sans MS",
                "Courier",
                "Courier New",
                "Geneva",
                "Georgia",
                "Helvetica",
                "Helvetica Neue",
                "Impact",
                "Microsoft Sans Serif",
                "Monaco",
                "Palatino",
                "Tahoma",
                "Times",
                "Times New Roman",
                "Trebuchet MS",
                "Verdana",
                "Wingdings",
                "Wingdings 2",
                "Wingdings 3",
            ],
        },
    ],
    separators=(",", ":"),
)
