"""Services package — all business logic lives here, never in routers.

Files:
  base.py      — BaseService: referential check, size budget, id allocation
  vendor.py    — REFERENCE service pattern; vendors and average rating
  catalog.py   — services offered by vendors
  contract.py  — vendor/department contracts
  feedback.py  — feedback + vendor rating append (two collections, one section)
  registry.py  — operation boundary returning Message values instead of raising

Rule: routers call services, services call repositories, repositories call the store.
      No FastAPI imports in services.
"""
