"""API module for bilibili_parts.

api layer:
- Validates inputs, applies the cross-origin policy
- Returns payloads for callers
- Forbidden: direct upstream HTTP calls
"""
