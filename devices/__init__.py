"""
Devices module - Identity of the device this service runs on.

This module handles:
- Environment signal collection
- Best-effort device fingerprinting
- Caching the device identifier in device-scoped storage
"""
