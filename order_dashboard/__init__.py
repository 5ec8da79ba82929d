"""
                Restaurant Order Dashboard

Order board backend: an in-memory order store with simulated latency
and a kanban projection that moves orders through preparation states.

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
