"""
Guit County site backend.

A FastAPI service behind the county's public website and admin panel:
generic CRUD over the site's collections, a consolidated public-data
snapshot, media uploads, singleton settings and commissioner profile, news
likes, dashboard statistics and back-office accounts.

Run with ``uvicorn guit_county.main:app``.
"""
