"""Vlyby adapter constants."""

BIDDER_CODE: str = "vlyby"

# Media types the bid adapter accepts from the host runtime
SUPPORTED_MEDIA_TYPES: tuple[str, ...] = ("video", "banner")

# Every interpreted bid is reported as a banner
RESPONSE_MEDIA_TYPE: str = "banner"

# Endpoints
BID_ENDPOINT_URL: str = "https://vlyby.com/prebid"
ANALYTICS_ENDPOINT_URL: str = (
    "https://europe-west3-vlybypoc2019.cloudfunctions.net/vanalytics"
)

REQUEST_METHOD: str = "POST"
CONTENT_TYPE: str = "application/json"

# Maximum characters kept from a stringified price in telemetry
PRICE_DISPLAY_WIDTH: int = 4

# Separators used when rendering a [width, height] pair
TELEMETRY_SIZE_SEPARATOR: str = ","
REQUEST_SIZE_SEPARATOR: str = "x"

# Status tag of the terminal marker appended to auction-end telemetry
AUCTION_END_MARKER: str = "auctionEnd"

# Protocol/version tag sent as hb_version
DEFAULT_HB_VERSION: str = "1.0.0"

# Seconds before an outbound HTTP send is abandoned
DEFAULT_SEND_TIMEOUT_S: float = 2.0
