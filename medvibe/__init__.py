"""
MedVibe prontuários backend: patient visit records, exam attachments and
AI-assisted triage suggestions.
"""
