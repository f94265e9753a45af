"""
PromptHub API

Backend for the prompt sharing community
- race-free view counters and like toggling
- per-user and platform statistics
- GitHub repository metrics with graceful fallback
- profile, settings and privacy storage
"""

__version__ = "1.0.0"
__author__ = "PromptHub Team"
