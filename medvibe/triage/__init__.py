"""
AI-assisted triage: prompt assembly, inference call and response parsing.
"""
