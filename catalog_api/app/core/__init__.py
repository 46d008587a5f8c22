"""
Cross‑cutting infrastructure: settings, logging, error kinds, locks
and the per‑application service container.
"""
