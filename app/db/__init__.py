"""Storage package — page memory, region manager, id counter, stable maps.

Files:
  memory.py      — raw page memory (VectorMemory, SqlPageMemory)
  manager.py     — splits one memory into tagged regions
  regions.py     — the fixed region tags
  cell.py        — durable id counter (region 0)
  stable_map.py  — ordered u64 → record map over one region
  store.py       — VendorStore tying it together, atomic() critical section
"""
