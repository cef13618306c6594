"""Export modules for results."""

from .excel_exporter import export_to_excel
from .json_exporter import export_to_json
from .pdf_exporter import export_to_pdf

__all__ = ["export_to_excel", "export_to_json", "export_to_pdf"]
