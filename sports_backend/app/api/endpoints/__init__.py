"""
Endpoint subpackage.

Each module defines an APIRouter for one entity collection (users,
events, tournaments, teams).  The routers are aggregated in
``router.py`` one level up.
"""
