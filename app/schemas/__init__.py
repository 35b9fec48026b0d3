"""Pydantic schemas package.

Folder intent:
  common.py    — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  message.py   — tagged Success / Error / NotFound / InvalidPayload results
  vendor.py    — REFERENCE pattern (payload in, entity out)
  service.py, contract.py, feedback.py — same pattern per entity
"""
