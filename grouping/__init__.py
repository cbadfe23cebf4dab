from .materialize import LotMaterializer, batched, materialize_lots  # noqa: F401
from .partition import (  # noqa: F401
    SplitMode,
    apply_group_choices,
    default_split_mode,
    keep_as_one,
    partition,
    plan_lots,
    resolve_split_mode,
)
