from .settings import (  # noqa: F401
    COMBINED_MANUFACTURER,
    DEFAULT_CURRENCY,
    DEFAULT_LOT_TITLE,
    EXTREME_COLS_LIMIT,
    FALLBACK_MANUFACTURER,
    HEADER_SCAN_ROWS,
    LINE_ITEM_BATCH_SIZE,
    MAX_FILE_SIZE_MB,
    MAX_SHEET_COLS,
    MAX_SHEET_ROWS,
    OUTPUT_ROOT,
    configure_logging,
)
