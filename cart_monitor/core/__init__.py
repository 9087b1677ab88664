from cart_monitor.core.errors import ExtractionError, ParseError, ElementNotFoundError
from cart_monitor.core.site_locale import SiteLocale, RON
from cart_monitor.core.price import parse_price, format_price
from cart_monitor.core.settle import settle
from cart_monitor.core.overlays import (
    DismissOutcome, OverlayPatterns,
    dismiss_overlays, dismiss_with_escape, dismiss_modal,
)
