"""
Extraction Context

Responsibilities:
- Normalizes pasted job description text
- Extracts title, skills, location, intake, stipend and perks with ordered heuristics
- Returns partial results; a field with no match is simply absent

Owns: Pattern vocabularies and sub-extractors
Never: Raises on non-matches, performs I/O, or touches form state
"""
