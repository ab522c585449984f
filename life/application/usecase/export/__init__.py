"""Data export use cases."""

from .export_data import ExportDataRequest, ExportDataResponse, ExportDataUseCase

__all__ = ["ExportDataRequest", "ExportDataResponse", "ExportDataUseCase"]
