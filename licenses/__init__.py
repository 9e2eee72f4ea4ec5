"""
Licenses module - License records and their device binding.

This module handles:
- License entity, key generation and domain rules
- The license record store (port and adapters)
- Activation, deactivation and status changes
- Export, import and clearing of the store
"""
