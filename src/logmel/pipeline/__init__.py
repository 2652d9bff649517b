"""Pipeline orchestration layer.

Pipeline modules wrap the library for batch use and return result dicts
(success, total, succeeded, failed, skipped, message, items, failures):
- `pipeline/resources.py` - build and check resource directories
- `pipeline/features.py` - run the extractor over sample arrays

Import policy:
- CLI imports only from `pipeline.*` for orchestration.
- Library modules must not import `pipeline.*`.
"""
