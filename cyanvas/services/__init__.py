"""Services Layer — stores and caches that connect the pure core to IO.

Invariants:
    - Services implement the core protocols (ChartStore) or compose them
      (DiscoveryCache); they never serialize
    - Every chart a service returns has its relationships loaded
"""
