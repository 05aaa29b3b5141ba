"""Testing helpers – record builders and Hypothesis strategies."""
from mp_listdata.testing.builder import RecordBuilder

__all__ = ["RecordBuilder"]
