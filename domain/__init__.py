from .canonical import (  # noqa: F401
    Cell,
    ExtraColumnSet,
    FieldMapping,
    Grid,
    LineRecord,
    LotGroup,
    LotProposal,
    MaterializationResult,
    Row,
)
from .errors import InvalidGridError, LotIntakeError, MaterializationError  # noqa: F401
