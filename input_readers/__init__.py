from .excel import read_grid  # noqa: F401
