from .columns import best_match, column_labels, map_columns  # noqa: F401
from .header import locate_header  # noqa: F401
from .oem import classify, detect_oem, manufacturer_from_cell  # noqa: F401
from .pipeline import ImportOverrides, ImportResult, import_workbook, run_import  # noqa: F401
from .rows import manual_record, normalize_rows  # noqa: F401
