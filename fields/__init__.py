from .normalization import (  # noqa: F401
    cell_text,
    is_empty_cell,
    is_number_cell,
    norm_key,
    row_has_any_value,
    to_decimal,
    to_quantity,
)
