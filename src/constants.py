"""Constants used throughout the application."""

# Default user agent for HTTP requests
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/140.0.0.0 Safari/537.36 Edg/140.0.0.0"
)

# Default configuration values
DEFAULT_CONFIG_PATH = "config.yaml"
DEFAULT_FETCHER = "requests"
DEFAULT_TIMEOUT = 30
DEFAULT_OUTPUT_DIRECTORY = "catalogs"

# Time (in ms) the browser fetcher lets a page run its JavaScript
BROWSER_SETTLE_MS = 3000

# Placeholders used when a page has no title element
NO_SERIE_TITLE = "no serie title"
NO_SEASON_TITLE = "no season title"
NO_EPISODE_TITLE = "no episode title"

# Download links are sometimes wrapped in a styled page: "<file>.mp4.html"
MP4_HTML_PATTERN = r"\.mp4\.html"
QUALITY_PATTERN = r"\d+p"

# WeCima constants
WECIMA_HOST_PATTERN = r"^https?://(?:www\.)?(?:wecima|mycima)\.[a-z.]+(?:/|$)"
WECIMA_SERIE_URL_PATTERN = r"^https?://[^/]+/series/.+"
WECIMA_EPISODE_URL_PATTERN = r"^https?://[^/]+/watch/.+"

# CSS selectors for the WeCima page types
WECIMA_SELECTORS = {
    "serie": {
        "title": ".Title--Content--Single-begin",
        "seasons": ".List--Seasons--Episodes a",
    },
    "season": {
        "title": ".Title--Content--Single-begin",
        "episodes": ".Episodes--Seasons--Episodes a",
    },
    "episode": {
        "title": ".Title--Content--Single-begin",
        "previous_episode_link": ".PrevEpisode",
        "episode_buttons": ".Episodes--Seasons--Episodes a",
        "downloads": ".List--Download--Wecima--Single a",
    },
}
