"""
Wound reports: records, status lifecycle, validation, storage and API.
"""
