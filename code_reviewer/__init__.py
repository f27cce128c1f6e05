"""
Code review service.

Exposes a single HTTP endpoint that forwards submitted source code to a
Gemini model configured as a senior code reviewer and returns its review.
"""
