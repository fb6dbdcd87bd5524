"""
TalentIQ backend.

Async REST API for collaborative coding interviews: practice problems,
remote code execution, and hosted video/chat interview sessions.
"""

__version__ = "0.1.0"
