"""
Recordbook: Services Layer
=============================

Service Inventory:
    - validator.validate_record: pure name/age bounds checks
    - record_store.RecordStore: parameterized SQL against the records table

Services know nothing about HTTP; they raise the exceptions defined in
recordbook.exceptions and the app maps those to status codes.
"""
