"""Application – filtering, search, sorting, pagination and the list-data pipeline."""
