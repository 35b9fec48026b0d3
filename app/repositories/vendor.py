"""Vendor repository — REFERENCE pattern for all repositories.

How to add a new repository:
  1. Create app/repositories/my_entity.py
  2. class MyEntityRepository(BaseRepository[MyEntity]):
         model = MyEntity
         region = RegionTag.MY_ENTITY
  3. Add the new tag to app/db/regions.py (never reuse a tag)
"""


from app.db.regions import RegionTag
from app.domain.vendor import Vendor
from app.repositories.base import BaseRepository


class VendorRepository(BaseRepository[Vendor]):
    model = Vendor
    region = RegionTag.VENDORS
