"""
Form Context

Responsibilities:
- Holds the in-progress job posting form, one field per extracted attribute
- Tracks per-field provenance (unset, ai-suggested, user-confirmed)
- Merges extraction results without overwriting user-confirmed values
- Validates the form and builds the job record handed to the job service

Owns: Field provenance state machine, submission validation
Never: Extracts fields itself or persists records
"""
