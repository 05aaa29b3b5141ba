"""
mp_listdata – generic list-data processing engine.

Import path convention::

    from mp_listdata.application.listdata import ListDataProcessor
    from mp_listdata.application.filtering import FilterRequest, TypedFilter, StringFilter
    from mp_listdata.application.pagination import PaginationRequest
    from mp_listdata.kernel.errors import ListDataError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
