"""
Exam attachments linked to prontuários and their text summary.
"""
