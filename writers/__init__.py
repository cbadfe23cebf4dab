from .lot_workbook import XlsxLotMaterializer, item_row  # noqa: F401
