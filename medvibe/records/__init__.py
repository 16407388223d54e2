"""
Prontuário (patient visit record) storage and routes.
"""
