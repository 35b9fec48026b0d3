"""v1 router package — all /api/v1/* endpoints live here.

Files:
  vendors.py    — REFERENCE router pattern; also the per-vendor listings
  services.py   — POST /services
  contracts.py  — POST /contracts
  feedback.py   — POST /feedback

Rule: Routers only handle HTTP (request parsing, response shaping).
      All business logic delegates to app/services/.
"""
