"""Application listdata – the filter → search → sort → paginate pipeline."""
from mp_listdata.application.listdata.processor import ListDataProcessor
from mp_listdata.application.listdata.result import ProcessedResult

__all__ = ["ListDataProcessor", "ProcessedResult"]
