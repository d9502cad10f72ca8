"""
jdfill - Job Description autoFILL

Turns a pasted job description into a partially-populated job posting form and
tracks, per field, whether each value was suggested by the extractor or
confirmed by a person.

Architecture:
- Extraction Context: Pure text -> structured fields heuristics
- Form Context: Field provenance tracking, validation and submission
"""

__version__ = "0.1.0"
