"""Report persistence."""

from modelsync.persistence.report import BatchReport, output_report_path, persist_report

__all__ = ["BatchReport", "output_report_path", "persist_report"]
