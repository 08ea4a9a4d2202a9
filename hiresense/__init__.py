"""
HireSense
A job board connecting job seekers and recruiters, with AI-assisted
resume/job matching.

Architecture:
- REST API (FastAPI) over one of PostgreSQL, MongoDB or a JSON file
- DeepSeek AI: match scores, resume feedback, job recommendations
- Python client with a local-file fallback when the API is unreachable
"""

__version__ = "1.0.0"
